"""Tests for logging setup."""

import logging
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from NihontoSearch.services import QueryCompiler
from NihontoSearch.utils.log import configure_logging, log, reset_logging


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        reset_logging()

    def test_console_only(self) -> None:
        self.assertIsNone(configure_logging(level="warning"))
        self.assertEqual(log.level, logging.WARNING)
        self.assertEqual(len(log.handlers), 1)
        self.assertFalse(log.propagate)

    def test_file_records_compiler_stages_at_debug(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = configure_logging(level="INFO", action="compile", log_to_file=True, log_dir=tmp)
            self.assertIsNotNone(path)
            assert path is not None
            self.assertEqual(path.parent, Path(tmp) / "compile")

            QueryCompiler().compile("tanto juyo goto")
            log.info("done")
            reset_logging()

            lines = path.read_text(encoding="utf-8").splitlines()
        self.assertTrue(any("[DEBG] phrases=" in line for line in lines), lines)
        self.assertTrue(lines[-1].endswith("[INFO] done"), lines)

    def test_reconfigure_replaces_handlers(self) -> None:
        configure_logging(level="DEBUG")
        configure_logging(level="ERROR")
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.handlers[0].level, logging.ERROR)

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(level="chatty")
        self.assertEqual(log.level, logging.INFO)

    def test_reset_restores_silent_default(self) -> None:
        configure_logging(level="DEBUG")
        reset_logging()
        self.assertTrue(log.propagate)
        self.assertEqual([type(h) for h in log.handlers], [logging.NullHandler])


if __name__ == "__main__":
    unittest.main()
