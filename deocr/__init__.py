"""deocr - strip embedded OCR text layers from PDF files in bulk"""

__version__ = "1.0.0"
