# tfidf_pipeline/vectors/aggregator.py
"""
Vector Aggregator Module
Fold the scored records of one document into a SparseWeightVector
"""
from typing import Iterable, Iterator

from tfidf_pipeline.errors import JoinContractViolation
from tfidf_pipeline.scoring.tfidf_scorer import TfIdfScoredRecord
from tfidf_pipeline.utils.logger import setup_logger
from tfidf_pipeline.utils.partition import partition_by_key
from tfidf_pipeline.vectors.sparse_vector import SparseWeightVector

logger = setup_logger("aggregator")


class VectorAggregator:
    """
    Append-fold of scored records, no dedup, no sorting, no normalization
    """

    def aggregate(self, records: Iterable[TfIdfScoredRecord]) -> SparseWeightVector:
        """
        Build the weight vector of one document.

        Args:
            records: Scored records of a single document, already grouped

        Returns:
            SparseWeightVector with entries in delivery order
        """
        vector = SparseWeightVector()
        doc_id = None
        for record in records:
            if doc_id is None:
                doc_id = record.doc_id
            elif record.doc_id != doc_id:
                raise JoinContractViolation(
                    f"record does not belong to group of document {doc_id}",
                    doc_id=record.doc_id, term=record.term,
                )
            vector.set_doc_id(record.doc_id)
            vector.add(record.term, record.weight)
        if doc_id is None:
            raise ValueError("Cannot aggregate an empty record group.")
        return vector

    def aggregate_all(self, records: Iterable[TfIdfScoredRecord]) -> Iterator[SparseWeightVector]:
        """
        Group scored records by doc id and yield one vector per document.
        """
        groups = partition_by_key(records, lambda r: r.doc_id)
        logger.info(f"Aggregating {len(groups)} document vectors")
        for group in groups.values():
            yield self.aggregate(group)
