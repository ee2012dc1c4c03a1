"""Identify PDF files by their leading bytes, never by extension"""

import logging
import os
from typing import Union

logger = logging.getLogger(__name__)

PDF_SIGNATURE = b"%PDF"

PathLike = Union[str, os.PathLike]


def read_signature(path: PathLike, size: int = len(PDF_SIGNATURE)) -> bytes:
    """
    Read up to ``size`` leading bytes of a file.

    Args:
        path: Any path; it need not exist or be a regular file

    Returns:
        The bytes read, or ``b""`` if the path could not be opened or read
    """
    try:
        with open(path, 'rb') as f:
            return f.read(size)
    except (OSError, ValueError) as e:
        logger.debug(f"Cannot read signature of {path}: {e}")
        return b""


def is_pdf(path: PathLike) -> bool:
    """True if the file starts with the %PDF magic bytes"""
    return read_signature(path) == PDF_SIGNATURE
