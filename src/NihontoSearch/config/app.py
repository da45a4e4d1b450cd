"""Root config: YAML layering and the parsed `AppConfig`.

`config/default.yml` holds every setting; a file given with `--config` only
needs the keys it changes and is deep-merged over the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from pathlib import Path
from typing import Any, Mapping

import yaml

from NihontoSearch.config.log import LogConfig, check_log, load_log
from NihontoSearch.config.output import OutputConfig, check_output, load_output
from NihontoSearch.config.search import SearchConfig, check_search, load_search

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    log: LogConfig
    search: SearchConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Build and check every section of an already merged mapping."""
    config = AppConfig(log=load_log(raw), search=load_search(raw), output=load_output(raw))
    check_log(config.log)
    check_search(config.search)
    check_output(config.output)
    return config


def read_yaml(path: Path) -> dict[str, Any]:
    """Read one YAML file; an empty file is an empty mapping."""
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{path}: config root must be a mapping")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge mappings; lists and scalars from `override` replace `base`."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(current, value)
        else:
            merged[key] = value
    return merged


def load_config(path: Path) -> AppConfig:
    """Load a single, complete config file."""
    return parse_config_dict(read_yaml(path))


def load_config_with_defaults(config_path: Path, default_path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load `config_path` layered over `default_path`.

    When both name the same file it is read once.
    """
    paths = [default_path]
    if config_path.resolve() != default_path.resolve():
        paths.append(config_path)
    return parse_config_dict(reduce(merge_config_dicts, map(read_yaml, paths), {}))
