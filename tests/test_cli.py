import subprocess
import sys
import unittest
import tempfile
from pathlib import Path

DOCUMENT = """
head:
  - tagName: meta
    attributes: {charset: utf-8}
body:
  - tagName: script
    attributes: {src: app.js, defer: true}
  - tagName: img
    attributes: {src: logo.png, hidden: false}
"""


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "htmltags.cli", *args],
        capture_output=True,
        text=True,
    )


class CliTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)
        self.document = self.tmp_path / "tags.yaml"
        self.document.write_text(DOCUMENT, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_render_all(self) -> None:
        result = _run("render", str(self.document))
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(
            result.stdout,
            '<meta charset="utf-8"><script src="app.js" defer></script><img src="logo.png">',
        )

    def test_render_filtered_xhtml_to_file(self) -> None:
        out = self.tmp_path / "out" / "body.html"
        result = _run("render", str(self.document), "--section", "body", "--tag", "img", "--xhtml", "--out", str(out))
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(out.read_text(encoding="utf-8"), '<img src="logo.png"/>')

    def test_render_warns_when_nothing_matches(self) -> None:
        result = _run("render", str(self.document), "--tag", "video")
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, "")
        self.assertIn("No tags matched: video", result.stderr)

    def test_page(self) -> None:
        template = self.tmp_path / "index.html"
        template.write_text("<head>{{ head_tags }}</head>", encoding="utf-8")
        result = _run("page", str(template), str(self.document))
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, '<head><meta charset="utf-8"></head>')

    def test_invalid_document_exits_nonzero(self) -> None:
        bad = self.tmp_path / "bad.yaml"
        bad.write_text("head:\n  - attributes: {}\n", encoding="utf-8")
        result = _run("render", str(bad))
        self.assertNotEqual(result.returncode, 0)
        self.assertIn("Invalid tag document", result.stderr)

    def test_missing_document_exits_nonzero(self) -> None:
        result = _run("render", str(self.tmp_path / "nope.yaml"))
        self.assertNotEqual(result.returncode, 0)
        self.assertIn("Tag document not found", result.stderr)

    def test_render_head_section(self) -> None:
        result = _run("render", str(self.document), "--section", "head")
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, '<meta charset="utf-8">')

    def test_no_xhtml_overrides_document(self) -> None:
        xhtml_document = self.tmp_path / "xhtml.yaml"
        xhtml_document.write_text("xhtml: true\n" + DOCUMENT, encoding="utf-8")

        result = _run("render", str(xhtml_document), "--section", "head")
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, '<meta charset="utf-8"/>')

        result = _run("render", str(xhtml_document), "--section", "head", "--no-xhtml")
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, '<meta charset="utf-8">')

    def test_page_template_error_exits_nonzero(self) -> None:
        template = self.tmp_path / "broken.html"
        template.write_text("{{ missing_value }}", encoding="utf-8")
        result = _run("page", str(template), str(self.document))
        self.assertNotEqual(result.returncode, 0)
        self.assertIn("Failed to render", result.stderr)

    def test_void_tags(self) -> None:
        result = _run("void-tags")
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout.splitlines()[:3], ["area", "base", "br"])
        self.assertEqual(len(result.stdout.splitlines()), 15)


if __name__ == "__main__":
    unittest.main()
