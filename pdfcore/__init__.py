"""Building blocks for reading PDF files: filters, color spaces, ciphers and lexical helpers."""

__version__ = "0.1.0"