"""End-to-end recursive sweeps over small temporary trees."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from indexify.errors import MetadataError, OutsideRootError
from indexify.generator import (
    OUTCOME_DRY_RUN,
    OUTCOME_SKIPPED,
    OUTCOME_WRITTEN,
    generate,
)
from indexify.guard import GENERATED_MARKER
from indexify.options import IndexOptions
from indexify.walk import iter_directories


def _snapshot(root: Path) -> dict[str, bytes | None]:
    state: dict[str, bytes | None] = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames:
            state[os.path.relpath(os.path.join(dirpath, name), root)] = None
        for name in filenames:
            path = Path(dirpath) / name
            state[os.path.relpath(path, root)] = path.read_bytes()
    return state


class RecursiveSweepTests(unittest.TestCase):
    def _make_tree(self, root: Path) -> None:
        (root / "b" / "deep").mkdir(parents=True)
        (root / "a").mkdir()
        (root / "a" / "notes.txt").write_text("notes", encoding="utf-8")
        (root / "b" / "deep" / "data.csv").write_text("1,2\n", encoding="utf-8")

    def test_walk_is_depth_first_in_name_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)

            visited = [path.relative_to(root).as_posix() for path in iter_directories(root)]

            self.assertEqual(visited, [".", "a", "b", "b/deep"])

    def test_sweep_writes_every_directory_with_relative_breadcrumbs(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)

            results = generate(root, IndexOptions(root=root, recursive=True))

            self.assertEqual([result.outcome for result in results], [OUTCOME_WRITTEN] * 4)
            deep_html = (root / "b" / "deep" / "index.html").read_text(encoding="utf-8")
            self.assertIn('href="../../"', deep_html)
            self.assertIn("data.csv", deep_html)
            self.assertIn("Index: /b/deep", deep_html)
            root_html = (root / "index.html").read_text(encoding="utf-8")
            self.assertNotIn("index.html</a>", root_html)

    def test_rerun_overwrites_own_output_and_skips_foreign_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)
            generate(root, IndexOptions(root=root, recursive=True))
            foreign = root / "a" / "index.html"
            foreign.write_bytes(b"<h1>hand made</h1>")
            (root / "b" / "extra.txt").write_text("new", encoding="utf-8")

            with self.assertLogs("indexify.generator", level="INFO") as logs:
                results = generate(root, IndexOptions(root=root, recursive=True))

            outcomes = {result.directory.relative_to(root).as_posix(): result.outcome for result in results}
            self.assertEqual(outcomes["a"], OUTCOME_SKIPPED)
            self.assertEqual(outcomes["b"], OUTCOME_WRITTEN)
            self.assertEqual(foreign.read_bytes(), b"<h1>hand made</h1>")
            self.assertIn("extra.txt", (root / "b" / "index.html").read_text(encoding="utf-8"))
            self.assertTrue(any("skipped:" in line for line in logs.output))

    def test_directory_named_like_index_is_skipped_and_sweep_continues(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "index.html").mkdir()
            (root / "z").mkdir()

            with self.assertLogs("indexify.generator", level="INFO"):
                results = generate(root, IndexOptions(root=root, recursive=True))

            self.assertEqual(results[0].outcome, OUTCOME_SKIPPED)
            self.assertTrue((root / "z" / "index.html").is_file())
            self.assertIn(GENERATED_MARKER, (root / "index.html" / "index.html").read_text(encoding="utf-8"))

    def test_dry_run_sweep_leaves_tree_unchanged(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)
            before = _snapshot(root)

            with self.assertLogs("indexify.render", level="INFO") as logs:
                results = generate(root, IndexOptions(root=root, recursive=True, dry_run=True))

            self.assertEqual(_snapshot(root), before)
            self.assertEqual({result.outcome for result in results}, {OUTCOME_DRY_RUN})
            self.assertEqual(len(logs.output), 4)

    def test_sweep_of_subtree_keeps_root_relative_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)

            generate(root / "b", IndexOptions(root=root, recursive=True))

            self.assertFalse((root / "index.html").exists())
            self.assertIn("Index: /b", (root / "b" / "index.html").read_text(encoding="utf-8"))

    def test_outside_root_aborts_sweep(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            other = Path(tmp) / "other"
            root.mkdir()
            other.mkdir()

            with self.assertRaises(OutsideRootError):
                generate(other, IndexOptions(root=root, recursive=True))

            self.assertFalse((other / "index.html").exists())

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_broken_symlink_aborts_run(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "dangling").symlink_to(root / "nowhere")

            with self.assertRaises(MetadataError):
                generate(root, IndexOptions(root=root))


if __name__ == "__main__":
    unittest.main()
