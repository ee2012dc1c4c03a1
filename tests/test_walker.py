#!/usr/bin/env python3
"""Tests for directory traversal and PDF collection"""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from deocr.detection import find_pdfs, walk_files
from conftest import PDF_BYTES, write_file


class TestWalkFiles:
    """walk_files yields regular files only, depth-first and sorted"""

    def test_yields_all_regular_files(self, mixed_tree):
        root, pdfs, others = mixed_tree
        assert set(walk_files(root)) == set(pdfs) | set(others)

    def test_order_is_stable(self, mixed_tree):
        root, _, _ = mixed_tree
        first = list(walk_files(root))
        second = list(walk_files(root))
        assert first == second
        assert first == [
            root / "a.pdf",
            root / "b.txt",
            root / "d.pdf",
            root / "nested" / "e.pdf",
            root / "nested" / "f.pdf",
            root / "nested" / "deep" / "c",
        ]

    def test_is_lazy(self, mixed_tree):
        root, _, _ = mixed_tree
        walker = walk_files(root)
        assert next(walker) == root / "a.pdf"

    def test_directories_not_yielded(self, tmp_path):
        (tmp_path / "empty" / "deeper").mkdir(parents=True)
        assert list(walk_files(tmp_path)) == []

    def test_skip_dirs(self, tmp_path):
        write_file(tmp_path / "a.pdf", PDF_BYTES)
        write_file(tmp_path / "removed-ocr" / "a.pdf", PDF_BYTES)
        write_file(tmp_path / "sub" / "removed-ocr" / "b.pdf", PDF_BYTES)
        write_file(tmp_path / "sub" / "b.pdf", PDF_BYTES)

        found = list(walk_files(tmp_path, skip_dirs=["removed-ocr"]))
        assert found == [tmp_path / "a.pdf", tmp_path / "sub" / "b.pdf"]

    @pytest.mark.skipif(not hasattr(os, "symlink") or sys.platform.startswith("win"),
                        reason="symlinks need POSIX")
    def test_symlinks_excluded(self, tmp_path):
        root = tmp_path / "root"
        real = write_file(root / "real.pdf", PDF_BYTES)
        outside = tmp_path / "outside"
        write_file(outside / "hidden.pdf", PDF_BYTES)
        os.symlink(real, root / "link.pdf")
        os.symlink(outside, root / "linked_dir")

        assert list(walk_files(root)) == [real]

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs mkfifo")
    def test_special_files_excluded(self, tmp_path):
        real = write_file(tmp_path / "real.pdf", PDF_BYTES)
        os.mkfifo(tmp_path / "pipe")
        assert list(walk_files(tmp_path)) == [real]

    def test_unreadable_subdirectory_is_skipped(self, tmp_path):
        good = write_file(tmp_path / "good" / "a.pdf", PDF_BYTES)
        write_file(tmp_path / "locked" / "b.pdf", PDF_BYTES)
        later = write_file(tmp_path / "zlast" / "c.pdf", PDF_BYTES)

        real_scandir = os.scandir

        def flaky_scandir(path):
            if Path(path).name == "locked":
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        with patch("deocr.detection.walker.os.scandir", side_effect=flaky_scandir):
            found = list(walk_files(tmp_path))

        assert found == [good, later]

    def test_missing_root_yields_nothing(self, tmp_path):
        assert list(walk_files(tmp_path / "missing")) == []


class TestFindPdfs:
    """find_pdfs keeps only files whose content sniffs as PDF"""

    def test_filters_by_content(self, mixed_tree):
        root, pdfs, others = mixed_tree
        found = find_pdfs(root)

        assert len(found) == len(pdfs)
        assert set(found) == set(pdfs)
        assert not set(found) & set(others)

    def test_misleading_extensions(self, mixed_tree):
        root, _, _ = mixed_tree
        found = find_pdfs(root)
        assert root / "b.txt" in found
        assert root / "d.pdf" not in found

    def test_empty_directory(self, tmp_path):
        assert find_pdfs(tmp_path) == []
