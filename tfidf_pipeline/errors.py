"""
Errors Module
Exception hierarchy shared by the pipeline stages
"""
from typing import Optional


class TfIdfPipelineError(Exception):
    """Base class for every error raised by the pipeline."""


class ParseError(TfIdfPipelineError, ValueError):
    """A document line (or DF row) could not be parsed."""

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line


class JoinContractViolation(TfIdfPipelineError):
    """
    Input broke the join/fold contract: a document count outside
    [1, corpus_size], mismatched join keys, or a record whose doc id
    disagrees with its group.
    """

    def __init__(self, message: str, doc_id: Optional[int] = None, term: Optional[str] = None):
        details = []
        if doc_id is not None:
            details.append(f"doc_id={doc_id}")
        if term is not None:
            details.append(f"term={term!r}")
        if details:
            message = f"{message} ({', '.join(details)})"
        super().__init__(message)
        self.doc_id = doc_id
        self.term = term


class DecodeError(TfIdfPipelineError, ValueError):
    """Encoded vector bytes are malformed."""


class TruncatedInput(DecodeError):
    """Encoded vector bytes ended before the declared content was read."""

    def __init__(self, message: str, partial=None):
        super().__init__(message)
        # DecodeResult holding whatever was read before the end of data
        self.partial = partial


class EncodingOverflow(TfIdfPipelineError, OverflowError):
    """A value does not fit in its signed 32-bit field."""
