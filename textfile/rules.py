"""
Fixed constants for reading and writing text files.

Thresholds and byte markers live here so the policies that use them stay
explicit and testable.
"""

import codecs

LF_BYTE = 0x0A
NUL_BYTE = 0x00

DEFAULT_ENCODING = "utf-8"
ASCII_ENCODING = "ascii"

# Short UTF-8 payloads are sometimes classified as the Western code page
# with ~0.95 confidence; only near-certain matches are accepted.
WESTERN_ENCODING = "cp1252"
WESTERN_MIN_CONFIDENCE = 0.99

UTF8_FAMILY = ("utf-8", "utf-8-sig")
UTF16_FAMILY = ("utf-16", "utf-16-le", "utf-16-be")

UTF8_BOM = codecs.BOM_UTF8                      # EF BB BF
UTF16_BOMS = (codecs.BOM_UTF16_BE, codecs.BOM_UTF16_LE)  # FE FF / FF FE

BOM_CHAR = "\ufeff"
