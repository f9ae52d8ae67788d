# tfidf_pipeline/scoring/tfidf_scorer.py
"""
TF/IDF Scorer
Join term frequencies with document frequencies and compute tf-idf weights
"""
import math
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from tfidf_pipeline.errors import JoinContractViolation
from tfidf_pipeline.extraction.term_frequency import TermFrequencyRecord
from tfidf_pipeline.utils.partition import partition_by_key
from tfidf_pipeline.scoring.document_frequency import DocumentFrequencyIndex, DocumentFrequencyRecord
from tfidf_pipeline.utils.logger import setup_logger

logger = setup_logger("tfidf_scorer")


@dataclass(frozen=True)
class TfIdfScoredRecord:
    """TF-IDF weight of ``term`` in document ``doc_id``."""

    doc_id: int
    term: str
    weight: float


class TfIdfScorer:
    """
    Computes weight = tf * ln(corpus_size / document_count)
    """

    def __init__(self, corpus_size: int, default_idf: Optional[float] = None):
        """
        Initialize the scorer.

        Args:
            corpus_size: Total number of documents in the corpus
            default_idf: IDF given to terms without a DF row (None drops them)
        """
        if isinstance(corpus_size, bool) or not isinstance(corpus_size, int) or corpus_size <= 0:
            raise ValueError(f"corpus_size must be a positive integer, got {corpus_size!r}")
        if default_idf is not None and (math.isnan(default_idf) or math.isinf(default_idf) or default_idf < 0):
            raise ValueError(f"default_idf must be a finite non-negative number, got {default_idf!r}")
        self.corpus_size = corpus_size
        self.default_idf = default_idf

    def idf(self, document_count: int, doc_id: Optional[int] = None, term: Optional[str] = None) -> float:
        """
        Inverse document frequency of a term.

        Raises:
            JoinContractViolation: If document_count is not in [1, corpus_size]
        """
        if document_count <= 0:
            raise JoinContractViolation(
                f"document_count must be positive, got {document_count}", doc_id=doc_id, term=term
            )
        if document_count > self.corpus_size:
            raise JoinContractViolation(
                f"document_count {document_count} exceeds corpus size {self.corpus_size}",
                doc_id=doc_id, term=term,
            )
        return math.log(self.corpus_size / document_count)

    def score(self, tf_record: TermFrequencyRecord, df_record: DocumentFrequencyRecord) -> TfIdfScoredRecord:
        """
        Score one matched (term frequency, document frequency) pair.

        Args:
            tf_record: Term frequency of the term in one document
            df_record: Corpus document frequency of the same term

        Returns:
            TfIdfScoredRecord
        """
        if tf_record.term != df_record.term:
            raise JoinContractViolation(
                f"join key mismatch, document frequency row is for {df_record.term!r}",
                doc_id=tf_record.doc_id, term=tf_record.term,
            )
        idf = self.idf(df_record.document_count, doc_id=tf_record.doc_id, term=tf_record.term)
        return TfIdfScoredRecord(tf_record.doc_id, tf_record.term, tf_record.frequency * idf)

    def join(
        self,
        tf_records: Iterable[TermFrequencyRecord],
        df_index: DocumentFrequencyIndex,
        on_violation: Optional[Callable[[JoinContractViolation], None]] = None,
    ) -> Iterator[TfIdfScoredRecord]:
        """
        Inner join of term frequency records with the DF index on term.

        Args:
            tf_records: Term frequency records of any number of documents
            df_index: Document frequency table
            on_violation: Called with each JoinContractViolation instead of raising it;
                the offending record is then left out of the output

        Yields:
            TfIdfScoredRecord per matched pair

        Raises:
            JoinContractViolation: If the scorer and the DF index disagree on the corpus size
        """
        if df_index.corpus_size != self.corpus_size:
            raise JoinContractViolation(
                f"scorer corpus size {self.corpus_size} differs from DF index corpus size {df_index.corpus_size}"
            )
        dropped = 0
        for term, group in partition_by_key(tf_records, lambda r: r.term).items():
            df_record = df_index.lookup(term)
            if df_record is not None:
                for tf_record in group:
                    try:
                        scored = self.score(tf_record, df_record)
                    except JoinContractViolation as e:
                        if on_violation is None:
                            raise
                        on_violation(e)
                        continue
                    yield scored
            elif self.default_idf is not None:
                for tf_record in group:
                    yield TfIdfScoredRecord(tf_record.doc_id, term, tf_record.frequency * self.default_idf)
            else:
                dropped += len(group)
                logger.debug(f"No document frequency for {term!r}, dropping {len(group)} records")
        if dropped:
            logger.info(f"Dropped {dropped} term frequency records without a document frequency")
