"""PDF discovery: content sniffing and tree walking"""

from .sniffer import PDF_SIGNATURE, is_pdf, read_signature
from .walker import find_pdfs, walk_files

__all__ = ["PDF_SIGNATURE", "is_pdf", "read_signature", "find_pdfs", "walk_files"]
