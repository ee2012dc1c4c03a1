"""Pytest configuration and fixtures for deocr tests."""

import os
import shutil
import sys
from pathlib import Path
from typing import List, Tuple

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from deocr.engines.base import TextLayerStripper
from deocr.errors import EngineFailedError


PDF_BYTES = b'%PDF-1.4\n1 0 obj\n<< /Type /Catalog /Pages 2 0 R >>\nendobj\n'


class CopyStripper(TextLayerStripper):
    """Stands in for Ghostscript: copies the input and records each call."""

    name = "copy"

    def __init__(self):
        self.calls: List[Tuple[Path, Path]] = []

    def strip(self, input_path: Path, output_path: Path) -> None:
        self.calls.append((Path(input_path), Path(output_path)))
        shutil.copyfile(input_path, output_path)


class FailingStripper(TextLayerStripper):
    """Engine that always exits non-zero."""

    name = "failing"

    def __init__(self):
        self.calls: List[Path] = []

    def strip(self, input_path: Path, output_path: Path) -> None:
        self.calls.append(Path(input_path))
        raise EngineFailedError("simulated failure", returncode=1)


def write_file(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture
def copy_stripper():
    return CopyStripper()


@pytest.fixture
def failing_stripper():
    return FailingStripper()


@pytest.fixture
def mixed_tree(tmp_path):
    """
    Directory with three signature-valid files and three that are not.

    Extensions deliberately lie about the content.
    """
    root = tmp_path / "scans"
    pdfs = [
        write_file(root / "a.pdf", PDF_BYTES),
        write_file(root / "b.txt", PDF_BYTES),
        write_file(root / "nested" / "deep" / "c", PDF_BYTES),
    ]
    others = [
        write_file(root / "d.pdf", b"plain text renamed to pdf"),
        write_file(root / "nested" / "e.pdf", b""),
        write_file(root / "nested" / "f.pdf", b"%PD"),
    ]
    return root, pdfs, others
