# tfidf_pipeline/vectors/sparse_vector.py
"""
Sparse Weight Vector Module
Per-document list of (term, weight) pairs
"""
import struct
from typing import Any, Dict, Iterator, List, Tuple

DEFAULT_DOC_ID = 0

_WEIGHT_BITS = struct.Struct(">d")


def _weight_key(entries: List[Tuple[str, float]]) -> List[Tuple[str, bytes]]:
    # Bit patterns, so NaN weights equal themselves and -0.0 differs from 0.0
    return [(term, _WEIGHT_BITS.pack(weight)) for term, weight in entries]


class SparseWeightVector:
    """
    Weight vector of one document, mapping terms to tf-idf weights.

    Entries keep insertion order and are neither sorted nor deduplicated.
    """

    def __init__(self, doc_id: int = DEFAULT_DOC_ID, entries=None):
        self.doc_id = doc_id
        self._entries: List[Tuple[str, float]] = []
        for term, weight in entries or ():
            self.add(term, weight)

    def set_doc_id(self, doc_id: int):
        self.doc_id = doc_id

    def add(self, term: str, weight: float):
        """
        Add a term with a given weight to the vector.

        Args:
            term: Term to add
            weight: Weight of term
        """
        if not isinstance(term, str):
            raise TypeError(f"term must be str, got {type(term).__name__}")
        self._entries.append((term, float(weight)))

    def clear(self):
        """Reset to the state of a freshly constructed vector."""
        self.doc_id = DEFAULT_DOC_ID
        self._entries = []

    @property
    def entries(self) -> List[Tuple[str, float]]:
        return list(self._entries)

    @property
    def terms(self) -> List[str]:
        return [term for term, _ in self._entries]

    @property
    def weights(self) -> List[float]:
        return [weight for _, weight in self._entries]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "doc_id": self.doc_id,
            "entries": [[term, weight] for term, weight in self._entries],
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[str, float]]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseWeightVector):
            return NotImplemented
        if self.doc_id != other.doc_id or len(self._entries) != len(other._entries):
            return False
        return _weight_key(self._entries) == _weight_key(other._entries)

    __hash__ = None

    def __repr__(self) -> str:
        return f"SparseWeightVector(doc_id={self.doc_id!r}, entries={self._entries!r})"

    def __str__(self) -> str:
        lines = [f"Document ID: {self.doc_id}\n"]
        for term, weight in self._entries:
            lines.append(f"< {term} , {weight} >\n")
        return "".join(lines)
