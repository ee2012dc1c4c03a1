"""Recursive, failure-tolerant directory traversal"""

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from .sniffer import is_pdf

logger = logging.getLogger(__name__)


def walk_files(root: Union[str, Path], skip_dirs: Iterable[str] = ()) -> Iterator[Path]:
    """
    Lazily yield every regular file below ``root``, depth-first.

    Entries are visited in name order. Symlinks are never yielded or
    followed. Directories whose name is in ``skip_dirs`` are not entered.
    Entries that raise while being listed or inspected are skipped.

    Args:
        root: Directory to walk
        skip_dirs: Directory names to prune from the traversal

    Yields:
        Paths of regular files
    """
    skip = frozenset(skip_dirs)
    pending = [Path(root)]

    while pending:
        directory = pending.pop()
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            continue

        subdirs = []
        for entry in entries:
            try:
                if entry.is_symlink():
                    continue
                if entry.is_dir(follow_symlinks=False):
                    if entry.name not in skip:
                        subdirs.append(Path(entry.path))
                elif entry.is_file(follow_symlinks=False):
                    yield Path(entry.path)
            except OSError as e:
                logger.debug(f"Skipping entry {entry.path}: {e}")

        # Reversed so the stack pops subdirectories in name order
        pending.extend(reversed(subdirs))


def find_pdfs(root: Union[str, Path], skip_dirs: Iterable[str] = ()) -> List[Path]:
    """Collect every file below ``root`` whose content sniffs as PDF"""
    pdf_files = [path for path in walk_files(root, skip_dirs) if is_pdf(path)]
    logger.info(f"Found {len(pdf_files)} PDF file(s) under {root}")
    return pdf_files
