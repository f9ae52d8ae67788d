# tfidf_pipeline/utils/text_utils.py
"""
Text Utilities Module
Document line parsing and term matching
"""
import re
from typing import List, Tuple

from tfidf_pipeline.errors import ParseError

# Letters, digits, underscore, '!' and '.', ASCII only
TERM_RE = re.compile(r"[A-Za-z0-9_!.]+", re.ASCII)
DOC_ID_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)

FIELD_DELIMITER = ","
TOKEN_DELIMITER = " "

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def is_term(token: str) -> bool:
    """Return True if the whole token is made of term characters."""
    return TERM_RE.fullmatch(token) is not None


def parse_doc_id(text: str) -> int:
    """
    Parse a document id field.

    Args:
        text: Raw id field

    Returns:
        Non-negative document id

    Raises:
        ParseError: If the field is not a non-negative 32-bit integer
    """
    if DOC_ID_RE.fullmatch(text) is None:
        raise ParseError(f"Malformed document id: {text!r}")
    doc_id = int(text)
    if doc_id < 0 or doc_id > INT32_MAX:
        raise ParseError(f"Document id out of range: {text!r}")
    return doc_id


def split_document(line: str, field_separator: str = "") -> Tuple[int, str]:
    """
    Split a raw document line into its id and its text.

    The content fields after the id are joined with ``field_separator``,
    which is empty by default: "1,ab,cd" gives text "abcd".

    Args:
        line: Raw document line "<doc_id>,<field>,<field>..."
        field_separator: String inserted between content fields

    Returns:
        Tuple of (doc_id, text)
    """
    fields = line.split(FIELD_DELIMITER)
    try:
        doc_id = parse_doc_id(fields[0])
    except ParseError as e:
        raise ParseError(str(e), line=line) from e
    return doc_id, field_separator.join(fields[1:])


def tokenize(text: str) -> List[str]:
    """Split text on the single space character."""
    if not text:
        return []
    return text.split(TOKEN_DELIMITER)
