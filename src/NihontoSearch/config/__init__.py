"""YAML configuration for NihontoSearch.

Sections: `log`, `search` (plus the top-level `queries` list) and `output`.
"""

from __future__ import annotations

from NihontoSearch.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from NihontoSearch.config.log import LogConfig
from NihontoSearch.config.output import OutputConfig
from NihontoSearch.config.search import SearchConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AppConfig",
    "LogConfig",
    "OutputConfig",
    "SearchConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
