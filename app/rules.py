"""
Deterministic validation and normalization rules.

This file exists to make non-goals explicit and enforceable.
"""

from typing import Dict

DEFAULT_INPUT_ENCODING = "iso-8859-1"  # single-byte Western European
DELIMITER = ";"
LINE_TERMINATOR = "\r\n"

ACCEPTED_EXTENSION = ".csv"
OUTPUT_SUFFIX = "_procesado.csv"

# Exhaustive. Anything not listed here passes through untouched.
REPLACEMENTS: Dict[str, str] = {
    "á": "a", "é": "e", "í": "i", "ó": "o", "ú": "u",
    "Á": "A", "É": "E", "Í": "I", "Ó": "O", "Ú": "U",
    "ñ": "n", "Ñ": "N",
    "ü": "u", "Ü": "U",
}

# Characters that force a serialized field to be quoted.
QUOTE_TRIGGERS = (DELIMITER, '"', "\n", "\r")

# Presentation caps
ERROR_PREVIEW_LIMIT = 10
ERROR_EXCERPT_LENGTH = 100
PREVIEW_ROWS = 10
PREVIEW_CELL_LENGTH = 30
