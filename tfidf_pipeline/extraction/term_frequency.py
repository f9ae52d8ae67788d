# tfidf_pipeline/extraction/term_frequency.py
"""
Term Frequency Module
Count qualifying terms per document
"""
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List

from tfidf_pipeline.utils.logger import setup_logger
from tfidf_pipeline.utils.text_utils import is_term, split_document, tokenize

logger = setup_logger("term_frequency")


@dataclass(frozen=True)
class TermFrequencyRecord:
    """Number of times ``term`` occurs in document ``doc_id``."""

    doc_id: int
    term: str
    frequency: int


class TermFrequencyExtractor:
    """
    Splits a document into terms and emits one TermFrequencyRecord per distinct term.

    Example:
        "1,Big Big Big Data" -> (1, "Big", 3), (1, "Data", 1)
    """

    def __init__(self, stop_words: Iterable[str] = (), field_separator: str = ""):
        """
        Initialize the extractor.

        Args:
            stop_words: Words never emitted as terms
            field_separator: String inserted between the content fields of a line
        """
        self.stop_words = frozenset(stop_words)
        self.field_separator = field_separator

    def terms(self, text: str) -> List[str]:
        """Return the qualifying tokens of text, in order and with repeats."""
        return [t for t in tokenize(text) if is_term(t) and t not in self.stop_words]

    def extract(self, line: str) -> List[TermFrequencyRecord]:
        """
        Compute term frequencies for one document line.

        Args:
            line: Raw document "<doc_id>,<field>,<field>..."

        Returns:
            List of TermFrequencyRecord, order unspecified

        Raises:
            ParseError: If the doc id is malformed
        """
        doc_id, text = split_document(line, self.field_separator)
        counts = Counter(self.terms(text))
        logger.debug(f"Document {doc_id}: {len(counts)} distinct terms")
        return [TermFrequencyRecord(doc_id, term, count) for term, count in counts.items()]

    def __call__(self, line: str) -> List[TermFrequencyRecord]:
        return self.extract(line)
