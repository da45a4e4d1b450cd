"""CLI tests through click's test runner."""

import json
import sys
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from NihontoSearch.cli import cli
from NihontoSearch.utils.log import reset_logging

_CONFIG_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

search:
  prefix_match: true
  min_term_length: 2
  max_query_length: 12

output:
  base_dir: out
  formats: [console, json]

queries:
  - bizen katana
"""


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def tearDown(self) -> None:
        # handlers installed by the CLI point at the runner's captured stderr
        reset_logging()

    def _invoke(self, *args: str):
        Path("cfg.yml").write_text(_CONFIG_YAML, encoding="utf-8")
        return self.runner.invoke(cli, ["--config", "cfg.yml", *args])

    def _written(self) -> list[dict]:
        files = list(Path("out/json").glob("compile_*.json"))
        self.assertEqual(len(files), 1)
        return json.loads(files[0].read_text(encoding="utf-8"))

    def test_compile_arguments(self) -> None:
        with self.runner.isolated_filesystem():
            result = self._invoke("compile", "tanto juyo goto")
            self.assertEqual(result.exit_code, 0, result.output)
            data = self._written()
        self.assertEqual(data[0]["semantic_filters"]["certifications"][0]["key"], "Juyo")
        self.assertEqual(data[0]["tsquery"]["query_string"], "goto:*")

    def test_compile_falls_back_to_configured_queries(self) -> None:
        with self.runner.isolated_filesystem():
            result = self._invoke("compile")
            self.assertEqual(result.exit_code, 0, result.output)
            data = self._written()
        self.assertEqual(data[0]["raw"], "bizen katana")
        self.assertEqual(data[0]["free_terms"], ["bizen"])

    def test_compile_truncates_long_input(self) -> None:
        with self.runner.isolated_filesystem():
            result = self._invoke("compile", "katana goto masamune")
            self.assertEqual(result.exit_code, 0, result.output)
            data = self._written()
        self.assertEqual(data[0]["raw"], "katana goto ")
        self.assertEqual(data[0]["free_terms"], ["goto"])

    def test_validate_exit_codes(self) -> None:
        with self.runner.isolated_filesystem():
            ok = self._invoke("validate", "(rai <-> kunimitsu) & katana:*")
            bad = self._invoke("validate", "katana & & goto")
        self.assertEqual(ok.exit_code, 0, ok.output)
        self.assertEqual(bad.exit_code, 1, bad.output)


if __name__ == "__main__":
    unittest.main()
