from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from compilesoy.constants import MAX_DIR_TRAVERSAL_DEPTH  # noqa: E402
from compilesoy.discovery.file_discovery import TemplateFileFinder, find_soy_files  # noqa: E402


def _touch(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TemplateFileFinderTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_only_suffix_matches(self) -> None:
        _touch(self.root / "a.soy")
        _touch(self.root / "b.html")
        _touch(self.root / "sub" / "c.soy")
        found = find_soy_files(self.root)
        self.assertEqual([p.name for p in found], ["a.soy", "c.soy"])

    def test_order_is_stable(self) -> None:
        for name in ("z.soy", "m.soy", "a.soy"):
            _touch(self.root / name)
        self.assertEqual([p.name for p in find_soy_files(self.root)], ["a.soy", "m.soy", "z.soy"])

    def test_single_file_root(self) -> None:
        f = _touch(self.root / "only.soy")
        self.assertEqual(TemplateFileFinder().find(f), [f])

    def test_single_file_root_with_other_suffix(self) -> None:
        f = _touch(self.root / "only.txt")
        self.assertEqual(TemplateFileFinder().find(f), [])

    def test_depth_bound(self) -> None:
        deepest_allowed = self.root.joinpath(*["d"] * MAX_DIR_TRAVERSAL_DEPTH)
        too_deep = deepest_allowed / "d"
        _touch(deepest_allowed / "ok.soy")
        _touch(too_deep / "skipped.soy")
        names = [p.name for p in find_soy_files(self.root)]
        self.assertIn("ok.soy", names)
        self.assertNotIn("skipped.soy", names)

    def test_custom_depth(self) -> None:
        _touch(self.root / "top.soy")
        _touch(self.root / "one" / "nested.soy")
        names = [p.name for p in TemplateFileFinder(max_depth=0).find(self.root)]
        self.assertEqual(names, ["top.soy"])

    def test_missing_root(self) -> None:
        with self.assertRaises(FileNotFoundError):
            find_soy_files(self.root / "nope")

    def test_directory_named_like_template_is_walked(self) -> None:
        _touch(self.root / "dir.soy" / "inner.soy")
        self.assertEqual([p.name for p in find_soy_files(self.root)], ["inner.soy"])


if __name__ == "__main__":
    unittest.main()
