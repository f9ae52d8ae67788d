import pytest

from tfidf_pipeline.codec.vector_codec import VectorCodec
from tfidf_pipeline.extraction.term_frequency import TermFrequencyExtractor
from tfidf_pipeline.scoring.document_frequency import DocumentFrequencyIndex

STOP_WORDS = frozenset(["a", "the", "is", "of", "and"])


@pytest.fixture
def stop_words():
    return STOP_WORDS


@pytest.fixture
def extractor(stop_words):
    return TermFrequencyExtractor(stop_words=stop_words)


@pytest.fixture
def df_index():
    return DocumentFrequencyIndex({"Big": 2, "Data": 2, "Hello": 2, "world!": 1}, corpus_size=4)


@pytest.fixture
def codec():
    return VectorCodec()
