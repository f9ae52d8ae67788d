# tfidf_pipeline/scoring/document_frequency.py
"""
Document Frequency Module
Read-only corpus statistics injected into the scorer
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional


@dataclass(frozen=True)
class DocumentFrequencyRecord:
    """Number of corpus documents containing ``term`` at least once."""

    term: str
    document_count: int


class DocumentFrequencyIndex:
    """
    Immutable term -> document count table plus the corpus size it was computed over.
    """

    def __init__(self, frequencies: Mapping[str, int], corpus_size: int):
        """
        Initialize the index.

        Args:
            frequencies: Mapping of term to document count
            corpus_size: Total number of documents in the corpus
        """
        if isinstance(corpus_size, bool) or not isinstance(corpus_size, int) or corpus_size <= 0:
            raise ValueError(f"corpus_size must be a positive integer, got {corpus_size!r}")
        self._frequencies = MappingProxyType(dict(frequencies))
        self._corpus_size = corpus_size

    @classmethod
    def from_records(cls, records: Iterable[DocumentFrequencyRecord], corpus_size: int) -> "DocumentFrequencyIndex":
        frequencies = {}
        for record in records:
            if record.term in frequencies:
                raise ValueError(f"Duplicate document frequency row for term {record.term!r}")
            frequencies[record.term] = record.document_count
        return cls(frequencies, corpus_size)

    @property
    def corpus_size(self) -> int:
        return self._corpus_size

    @property
    def frequencies(self) -> Mapping[str, int]:
        return self._frequencies

    def lookup(self, term: str) -> Optional[DocumentFrequencyRecord]:
        count = self._frequencies.get(term)
        if count is None:
            return None
        return DocumentFrequencyRecord(term, count)

    def records(self) -> Iterator[DocumentFrequencyRecord]:
        for term, count in self._frequencies.items():
            yield DocumentFrequencyRecord(term, count)

    def __contains__(self, term: object) -> bool:
        return term in self._frequencies

    def __len__(self) -> int:
        return len(self._frequencies)

    def __repr__(self) -> str:
        return f"DocumentFrequencyIndex(terms={len(self)}, corpus_size={self._corpus_size})"
