"""
Utilities Module
Helper functions and utilities
"""
from .logger import setup_logger, set_level
from .partition import partition_by_key
from .text_utils import (
    is_term,
    parse_doc_id,
    split_document,
    tokenize,
    INT32_MIN,
    INT32_MAX,
)

__all__ = [
    "setup_logger",
    "set_level",
    "partition_by_key",
    "is_term",
    "parse_doc_id",
    "split_document",
    "tokenize",
    "INT32_MIN",
    "INT32_MAX",
]
