import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "svginline.cli", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
    )


class InlineCliTest(unittest.TestCase):
    def test_inline_then_check_and_verify_end_to_end(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)
            out = tmp_path / "dist"
            (out / "img").mkdir(parents=True)
            (out / "img" / "mark.svg").write_text(
                '<svg viewBox="0 0 1 1">\n  <title>Mark</title>\n</svg>\n', encoding="utf-8"
            )
            (out / "index.html").write_text(
                '<main><img inline src="img/mark.svg" role="img"></main>', encoding="utf-8"
            )
            config_path = tmp_path / "svginline.yaml"
            config_path.write_text("svgoConfig:\n  removeTitle: true\n", encoding="utf-8")

            pending = _run("inline", "--out", str(out), "--config", str(config_path), "--check")
            self.assertNotEqual(pending.returncode, 0)
            self.assertIn("index.html", pending.stderr)

            unverified = _run("verify", "--root", str(out))
            self.assertNotEqual(unverified.returncode, 0)
            self.assertIn("img/mark.svg", unverified.stderr)

            result = _run("inline", "--out", str(out), "--config", str(config_path))
            self.assertEqual(result.returncode, 0, result.stderr)
            self.assertEqual(
                (out / "index.html").read_text(encoding="utf-8"),
                '<main><svg role="img" viewBox="0 0 1 1"></svg></main>',
            )

            checked = _run("inline", "--out", str(out), "--config", str(config_path), "--check")
            self.assertEqual(checked.returncode, 0, checked.stderr)

            verified = _run("verify", "--root", str(out))
            self.assertEqual(verified.returncode, 0, verified.stderr)

    def test_missing_asset_fails_without_writing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "dist"
            out.mkdir()
            page = out / "index.html"
            page.write_text('<img inline src="nope.svg">', encoding="utf-8")

            result = _run("inline", "--out", str(out), "--config", str(Path(tmp) / "absent.yaml"))

            self.assertNotEqual(result.returncode, 0)
            self.assertIn("no such asset nope.svg", result.stderr)
            self.assertEqual(page.read_text(encoding="utf-8"), '<img inline src="nope.svg">')

    def test_undecodable_asset_reports_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "dist"
            out.mkdir()
            (out / "latin.svg").write_bytes("<svg><text>caf\xe9</text></svg>".encode("latin-1"))
            (out / "index.html").write_text('<img inline src="latin.svg">', encoding="utf-8")

            result = _run("inline", "--out", str(out), "--config", str(Path(tmp) / "absent.yaml"))

            self.assertNotEqual(result.returncode, 0)
            self.assertIn("latin.svg is not valid UTF-8", result.stderr)
            self.assertNotIn("Traceback", result.stderr)


if __name__ == "__main__":
    unittest.main()
