"""Tests for console and JSON plan writers."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from NihontoSearch.renderers import (
    ConsoleOutputWriter,
    JsonFileWriter,
    MultiOutputWriter,
    render_json,
    render_text,
)
from NihontoSearch.services import QueryCompiler


class TestRenderers(unittest.TestCase):
    def setUp(self) -> None:
        self.compiler = QueryCompiler(extract_provinces=True)

    def test_render_text(self) -> None:
        text = render_text(self.compiler.compile("tokuju bizen katana nagasa>=70.5 goto"))
        self.assertIn("Filter: nagasa_cm >= 70.5", text)
        self.assertIn("Certification: Tokuju", text)
        self.assertIn("Item type: katana", text)
        self.assertIn("Province: Bizen", text)
        self.assertIn("tsquery (terms): goto:*", text)

    def test_render_text_empty_plan(self) -> None:
        self.assertIn("nothing to search for", render_text(self.compiler.compile(" ")))

    def test_render_json_includes_db_variants(self) -> None:
        payload = render_json(self.compiler.compile("tokuju soshu usd<=100"))
        self.assertEqual(payload["numeric_filters"], [{"field": "price_value", "op": "lte", "value": 15000.0}])
        certs = payload["semantic_filters"]["certifications"]
        self.assertEqual(certs[0]["key"], "Tokuju")
        self.assertIn("Tokubetsu Juyo", certs[0]["db_variants"])
        provinces = payload["semantic_filters"]["provinces"]
        self.assertEqual(provinces, [{"key": "Soshu", "db_variants": ["Soshu", "Sagami"]}])
        self.assertTrue(payload["tsquery"]["is_empty"])
        json.dumps(payload)

    def test_json_writer_writes_one_file_per_run(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            writer = MultiOutputWriter([ConsoleOutputWriter(), JsonFileWriter(tmp)])
            writer.write_plan(self.compiler.compile('"Rai Kunimitsu" katana'))
            writer.write_plan(self.compiler.compile("tanto juyo goto"))
            writer.finalize("compile")

            files = list((Path(tmp) / "json").glob("compile_*.json"))
            self.assertEqual(len(files), 1)
            data = json.loads(files[0].read_text(encoding="utf-8"))

        self.assertEqual([d["raw"] for d in data], ['"Rai Kunimitsu" katana', "tanto juyo goto"])
        self.assertEqual(data[0]["tsquery"]["query_string"], "rai <-> kunimitsu")
        self.assertTrue(data[0]["tsquery"]["is_phrase_search"])
        self.assertEqual(data[1]["free_terms"], ["goto"])


if __name__ == "__main__":
    unittest.main()
