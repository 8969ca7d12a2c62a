"""Diagnostics package.

- code_barcode: leap-year and code barcodes (requires the diagnostics extras)
"""

__all__ = ["code_barcode"]
