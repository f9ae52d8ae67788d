"""
Build Pipeline Module
Run documents through extraction, tf-idf join, aggregation and encoding
"""
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from tqdm import tqdm

from tfidf_pipeline.codec.vector_codec import VectorCodec
from tfidf_pipeline.config.config import AppConfig
from tfidf_pipeline.errors import JoinContractViolation, ParseError
from tfidf_pipeline.extraction.term_frequency import TermFrequencyExtractor, TermFrequencyRecord
from tfidf_pipeline.scoring.document_frequency import DocumentFrequencyIndex
from tfidf_pipeline.scoring.tfidf_scorer import TfIdfScorer
from tfidf_pipeline.utils.logger import setup_logger
from tfidf_pipeline.vectors.aggregator import VectorAggregator
from tfidf_pipeline.vectors.sparse_vector import SparseWeightVector

logger = setup_logger("pipeline")


@dataclass(frozen=True)
class DocumentFailure:
    """A document line skipped because it could not be parsed."""

    line_number: int
    line: str
    reason: str


@dataclass
class PipelineResult:
    vectors: List[SparseWeightVector] = field(default_factory=list)
    encoded: Dict[int, bytes] = field(default_factory=dict)
    failures: List[DocumentFailure] = field(default_factory=list)
    violations: List[JoinContractViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures and not self.violations


class TfIdfPipeline:
    """
    documents -> term frequencies -> tf-idf records -> vectors -> bytes
    """

    def __init__(
        self,
        extractor: TermFrequencyExtractor,
        scorer: TfIdfScorer,
        df_index: DocumentFrequencyIndex,
        aggregator: Optional[VectorAggregator] = None,
        codec: Optional[VectorCodec] = None,
        max_workers: int = 1,
        show_progress: bool = False,
    ):
        """
        Initialize the pipeline.

        Args:
            extractor: Term frequency extractor
            scorer: TF-IDF scorer
            df_index: Document frequency table
            aggregator: Vector aggregator
            codec: Vector codec
            max_workers: Threads used for extraction (1 runs inline)
            show_progress: Show a tqdm progress bar during extraction
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.extractor = extractor
        self.scorer = scorer
        self.df_index = df_index
        self.aggregator = aggregator or VectorAggregator()
        self.codec = codec or VectorCodec()
        self.max_workers = max_workers
        self.show_progress = show_progress

    @classmethod
    def from_config(
        cls,
        config: Union[AppConfig, Dict[str, Any]],
        df_index: DocumentFrequencyIndex,
        stop_words: Optional[Iterable[str]] = None,
    ) -> "TfIdfPipeline":
        """
        Build a pipeline from configuration.

        Args:
            config: AppConfig or its config dict
            df_index: Document frequency table
            stop_words: Stop words overriding extraction.stop_words
        """
        if isinstance(config, AppConfig):
            config = config.config
        extraction_config = config.get('extraction') or {}
        scoring_config = config.get('scoring') or {}
        execution_config = config.get('execution') or {}

        if stop_words is None:
            stop_words = extraction_config.get('stop_words') or []
        extractor = TermFrequencyExtractor(
            stop_words=stop_words,
            field_separator=extraction_config.get('field_separator') or "",
        )
        scorer = TfIdfScorer(
            corpus_size=df_index.corpus_size,
            default_idf=scoring_config.get('default_idf'),
        )
        return cls(
            extractor,
            scorer,
            df_index,
            max_workers=execution_config.get('max_workers') or 1,
            show_progress=execution_config.get('show_progress', False),
        )

    def _extract_one(self, item: Tuple[int, str]):
        line_number, line = item
        try:
            return self.extractor.extract(line), None
        except ParseError as e:
            return [], DocumentFailure(line_number, line, str(e))

    def extract_all(self, lines: Iterable[str]) -> Tuple[List[TermFrequencyRecord], List[DocumentFailure]]:
        """
        Extract term frequencies of every document, skipping unparsable ones.

        Returns:
            Tuple of (term frequency records, failed documents)
        """
        items = list(enumerate(lines, start=1))
        if self.max_workers > 1 and len(items) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = executor.map(self._extract_one, items)
                results = list(tqdm(results, total=len(items), desc="Extracting", unit="doc",
                                    disable=not self.show_progress))
        else:
            results = [self._extract_one(item) for item in tqdm(items, desc="Extracting", unit="doc",
                                                                 disable=not self.show_progress)]

        records: List[TermFrequencyRecord] = []
        failures: List[DocumentFailure] = []
        for extracted, failure in results:
            if failure is not None:
                logger.warning(f"Skipping document on line {failure.line_number}: {failure.reason}")
                failures.append(failure)
            records.extend(extracted)
        logger.info(f"Extracted {len(records)} term frequencies from {len(items) - len(failures)} documents")
        return records, failures

    def run(self, lines: Iterable[str]) -> PipelineResult:
        """
        Run the full pipeline.

        Args:
            lines: Raw document lines

        Returns:
            PipelineResult
        """
        result = PipelineResult()
        records, result.failures = self.extract_all(lines)

        scored = self.scorer.join(records, self.df_index, on_violation=self._report_violation(result))
        for vector in self.aggregator.aggregate_all(scored):
            result.vectors.append(vector)
            result.encoded[vector.doc_id] = self.codec.encode(vector)

        logger.info(
            f"Built {len(result.vectors)} vectors "
            f"({len(result.failures)} documents skipped, {len(result.violations)} contract violations)"
        )
        return result

    @staticmethod
    def _report_violation(result: PipelineResult):
        def report(violation: JoinContractViolation):
            logger.error(f"Dropping record: {violation}")
            result.violations.append(violation)
        return report

    def save(self, result: PipelineResult, path: str) -> int:
        """
        Write the encoded vectors of a run back to back into one file.

        Returns:
            Number of bytes written
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        written = 0
        with open(path, "wb") as f:
            for vector in result.vectors:
                data = result.encoded[vector.doc_id]
                f.write(data)
                written += len(data)
        logger.info(f"Saved {len(result.vectors)} vectors ({written} bytes) to {path}")
        return written
