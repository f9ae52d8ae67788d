# tfidf_pipeline/data/dataloader.py
"""
Data Loader Module
Load documents, document frequencies and stop words from files
"""
import csv
import os
from typing import FrozenSet, List

from tfidf_pipeline.errors import ParseError
from tfidf_pipeline.scoring.document_frequency import DocumentFrequencyIndex, DocumentFrequencyRecord
from tfidf_pipeline.utils.logger import setup_logger

logger = setup_logger("dataloader")

DF_HEADER = ("term", "document_count")


class CorpusLoader:
    """
    Loader for the pipeline's file inputs
    """

    def __init__(self, encoding: str = "utf-8"):

        self.encoding = encoding

    def _check_exists(self, file_path: str):
        if not os.path.exists(file_path):
            logger.error(f"File not found: {file_path}")
            raise FileNotFoundError(f"File not found: {file_path}")

    def load_documents(self, file_path: str) -> List[str]:
        """
        Load raw document lines.

        Args:
            file_path: Path to a text file with one "<doc_id>,<text>" document per line

        Returns:
            List of document lines, blank lines skipped
        """
        self._check_exists(file_path)
        logger.info(f"Loading documents from {file_path}")
        with open(file_path, "r", encoding=self.encoding) as f:
            lines = [line.rstrip("\r\n") for line in f]
        documents = [line for line in lines if line.strip()]
        logger.info(f"Successfully loaded {len(documents)} documents")
        return documents

    def load_document_frequencies(self, file_path: str, corpus_size: int) -> DocumentFrequencyIndex:
        """
        Load the precomputed document frequency table.

        Args:
            file_path: CSV file with "term,document_count" rows, header optional
            corpus_size: Number of documents the table was computed over

        Returns:
            DocumentFrequencyIndex
        """
        self._check_exists(file_path)
        logger.info(f"Loading document frequencies from {file_path}")
        records = []
        first_row = True
        with open(file_path, "r", encoding=self.encoding, newline="") as f:
            for row_number, row in enumerate(csv.reader(f), start=1):
                if not any(c.strip() for c in row):
                    continue
                # Header is optional and only recognised on the first non-empty row
                if first_row:
                    first_row = False
                    if tuple(c.strip() for c in row) == DF_HEADER:
                        continue
                if len(row) != 2:
                    raise ParseError(
                        f"{file_path}:{row_number}: expected 2 columns, got {len(row)}",
                        line=",".join(row),
                    )
                term, count = row
                try:
                    document_count = int(count)
                except ValueError as e:
                    raise ParseError(
                        f"{file_path}:{row_number}: malformed document count {count!r}",
                        line=",".join(row),
                    ) from e
                records.append(DocumentFrequencyRecord(term, document_count))
        index = DocumentFrequencyIndex.from_records(records, corpus_size)
        logger.info(f"Successfully loaded {len(index)} document frequencies (corpus size {corpus_size})")
        return index

    def load_stop_words(self, file_path: str) -> FrozenSet[str]:
        """
        Load a stop word list.

        Args:
            file_path: Text file with one word per line, '#' starts a comment

        Returns:
            Frozen set of stop words
        """
        self._check_exists(file_path)
        words = set()
        with open(file_path, "r", encoding=self.encoding) as f:
            for line in f:
                word = line.split("#", 1)[0].strip()
                if word:
                    words.add(word)
        logger.info(f"Loaded {len(words)} stop words from {file_path}")
        return frozenset(words)
