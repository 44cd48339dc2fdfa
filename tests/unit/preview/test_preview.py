"""Tests for end-to-end directory preview generation.

Covers the full-versus-directories-only decision, hidden-entry filtering,
empty directories and truncation against real temporary directories.
"""

from __future__ import annotations

import io
import tempfile
import unittest
from itertools import count
from pathlib import Path
from unittest import mock

from dirpeek.ansi import strip_ansi
from dirpeek.layout import TRUNCATION_MARKER
from dirpeek.preview import build_directory_preview, run_preview


def frozen_clock():
    return mock.patch("time.perf_counter_ns", return_value=0)


class BuildDirectoryPreviewTests(unittest.TestCase):
    def test_small_listing_fits_on_one_row(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("c", "a", "b"):
                (root / name).write_text("x", encoding="utf-8")

            with frozen_clock():
                rendered = build_directory_preview(root, 2, 80)

            self.assertEqual(rendered, "a       b       c       \n")

    def test_hidden_entries_are_never_shown(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".env").write_text("x", encoding="utf-8")
            (root / ".git").mkdir()
            (root / "visible").write_text("x", encoding="utf-8")

            with frozen_clock():
                rendered = strip_ansi(build_directory_preview(root, 2, 80))

            self.assertNotIn(".env", rendered)
            self.assertNotIn(".git", rendered)
            self.assertIn("visible", rendered)

    def test_empty_directory_renders_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".only_hidden").write_text("x", encoding="utf-8")

            with frozen_clock():
                self.assertEqual(build_directory_preview(root, 2, 80), "")

    def test_directory_cap_shows_only_directories_and_truncates(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for idx in range(50):
                (root / f"d{idx:02d}").mkdir()
            (root / "file.txt").write_text("x", encoding="utf-8")

            with frozen_clock():
                rendered = strip_ansi(build_directory_preview(root, 2, 40))

            lines = rendered.splitlines()
            self.assertEqual(len(lines), 3)
            self.assertEqual(lines[-1], TRUNCATION_MARKER)
            names = " ".join(lines[:-1]).split()
            self.assertEqual(len(names), 9)
            self.assertEqual(len(lines[0].split()), 5)
            self.assertTrue(all(name.startswith("d") and name.endswith("/") for name in names))
            self.assertEqual(names, sorted(names))
            self.assertNotIn("file.txt", rendered)

    def test_slow_scan_shows_only_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for idx in range(3):
                (root / f"dir{idx}").mkdir()
                (root / f"file{idx}").write_text("x", encoding="utf-8")

            ticks = count(0, 20_000_000)
            with mock.patch("time.perf_counter_ns", side_effect=lambda: next(ticks)):
                rendered = strip_ansi(build_directory_preview(root, 2, 80))

            # Only the first scanned entry is read before the time budget trips.
            self.assertNotIn("file", rendered)

    def test_more_entries_than_capacity_shows_only_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("a.txt", "b.txt", "c.txt"):
                (root / name).write_text("x", encoding="utf-8")
            (root / "sub").mkdir()

            with frozen_clock():
                rendered = strip_ansi(build_directory_preview(root, 2, None))

            self.assertEqual(rendered, "sub/\n")

    def test_overflow_without_directories_renders_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("a.txt", "b.txt", "c.txt"):
                (root / name).write_text("x", encoding="utf-8")

            with frozen_clock():
                self.assertEqual(build_directory_preview(root, 2, None), "")

    def test_layout_overflow_narrows_to_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a_long_file_name.txt").write_text("x", encoding="utf-8")
            (root / "b").write_text("x", encoding="utf-8")
            (root / "src").mkdir()

            with frozen_clock():
                rendered = strip_ansi(build_directory_preview(root, 1, 24))

            self.assertEqual(rendered, "src/     \n")

    def test_missing_directory_raises_os_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                build_directory_preview(Path(tmp) / "missing", 2, 80)

    def test_zero_max_lines_is_rejected_before_scanning(self) -> None:
        with mock.patch("dirpeek.preview.scan_directory") as scan:
            with self.assertRaises(ValueError):
                build_directory_preview(".", 0, 80)
        scan.assert_not_called()


class RunPreviewTests(unittest.TestCase):
    def test_run_preview_uses_detected_terminal_width(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("a", "b"):
                (root / name).write_text("x", encoding="utf-8")

            stream = io.StringIO()
            with frozen_clock(), mock.patch("dirpeek.preview.query_terminal_width", return_value=80) as query:
                run_preview(root, 2, stream=stream)

            query.assert_called_once_with()
            self.assertEqual(stream.getvalue(), "a       b       \n")

    def test_run_preview_without_terminal_uses_one_column(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a").write_text("x", encoding="utf-8")

            stream = io.StringIO()
            with frozen_clock(), mock.patch("dirpeek.preview.query_terminal_width", return_value=None):
                run_preview(root, 2, stream=stream)

            self.assertEqual(stream.getvalue(), "a\n")

    def test_explicit_width_skips_detection(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a").write_text("x", encoding="utf-8")

            stream = io.StringIO()
            with frozen_clock(), mock.patch("dirpeek.preview.query_terminal_width") as query:
                run_preview(root, 2, stream=stream, terminal_width=16)

            query.assert_not_called()
            self.assertEqual(stream.getvalue(), "a       \n")

    def test_empty_directory_writes_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            stream = io.StringIO()
            run_preview(Path(tmp), 2, stream=stream, detect_width=False)
            self.assertEqual(stream.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
