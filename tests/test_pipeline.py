import math
from pathlib import Path

import pytest

from tfidf_pipeline.codec.vector_codec import VectorCodec
from tfidf_pipeline.config.config import AppConfig
from tfidf_pipeline.data.dataloader import CorpusLoader
from tfidf_pipeline.extraction.term_frequency import TermFrequencyExtractor
from tfidf_pipeline.pipelines.build_pipeline import TfIdfPipeline
from tfidf_pipeline.scoring.document_frequency import DocumentFrequencyIndex
from tfidf_pipeline.scoring.tfidf_scorer import TfIdfScorer
from tfidf_pipeline.vectors.sparse_vector import SparseWeightVector

LINES = [
    "1,Big Big Big Data",
    "2,Hello Big Data",
    "oops,not a document",
    "3,Hello world! the co-op",
]


@pytest.fixture
def pipeline(extractor, df_index):
    return TfIdfPipeline(extractor, TfIdfScorer(df_index.corpus_size), df_index)


def test_run_builds_one_vector_per_document(pipeline):
    result = pipeline.run(LINES)
    ln2 = math.log(2)
    assert [v.doc_id for v in result.vectors] == [1, 2, 3]
    assert result.vectors[0] == SparseWeightVector(1, [("Big", 3 * ln2), ("Data", ln2)])
    assert result.vectors[1].terms == ["Big", "Data", "Hello"]
    assert result.vectors[2].terms == ["Hello", "world!"]
    assert result.vectors[2].weights[1] == pytest.approx(math.log(4))


def test_parse_failures_are_isolated(pipeline):
    result = pipeline.run(LINES)
    assert len(result.failures) == 1
    failure = result.failures[0]
    assert failure.line_number == 3
    assert failure.line == "oops,not a document"
    assert "oops" in failure.reason
    assert not result.ok


def test_encoded_vectors_decode_to_vectors(pipeline):
    result = pipeline.run(LINES)
    codec = VectorCodec()
    for vector in result.vectors:
        decoded = codec.decode(result.encoded[vector.doc_id])
        assert decoded.complete
        assert decoded.vector == vector


def test_threaded_extraction_matches_inline(extractor, df_index):
    inline = TfIdfPipeline(extractor, TfIdfScorer(4), df_index).run(LINES)
    threaded = TfIdfPipeline(extractor, TfIdfScorer(4), df_index, max_workers=4).run(LINES)
    assert threaded.vectors == inline.vectors
    assert threaded.failures == inline.failures


def test_documents_without_scored_terms_produce_no_vector(pipeline):
    result = pipeline.run(["9,unknown words only", "1,Data"])
    assert [v.doc_id for v in result.vectors] == [1]
    assert result.ok


def test_contract_violations_are_reported(extractor):
    df_index = DocumentFrequencyIndex({"Big": 0, "Data": 1}, corpus_size=2)
    pipeline = TfIdfPipeline(extractor, TfIdfScorer(2), df_index)
    result = pipeline.run(["1,Big Data"])
    assert result.vectors == [SparseWeightVector(1, [("Data", math.log(2))])]
    assert len(result.violations) == 1
    assert result.violations[0].term == "Big"
    assert not result.ok


def test_invalid_max_workers(extractor, df_index):
    with pytest.raises(ValueError):
        TfIdfPipeline(extractor, TfIdfScorer(4), df_index, max_workers=0)


def test_from_config(tmp_path, df_index):
    path = tmp_path / "config.yaml"
    path.write_text(
        "extraction:\n"
        "  field_separator: ' '\n"
        "  stop_words: [Hello]\n"
        "scoring:\n"
        "  default_idf: 1.0\n"
        "execution:\n"
        "  max_workers: 2\n"
        "  show_progress: false\n",
        encoding="utf-8",
    )
    pipeline = TfIdfPipeline.from_config(AppConfig(str(path)), df_index)
    assert pipeline.max_workers == 2
    assert pipeline.extractor.stop_words == frozenset(["Hello"])
    assert pipeline.scorer.corpus_size == 4

    result = pipeline.run(["5,Hello Big,extra"])
    assert result.vectors[0].entries == [("Big", math.log(2)), ("extra", 1.0)]


def test_from_config_stop_word_override(df_index):
    pipeline = TfIdfPipeline.from_config({"extraction": {"stop_words": ["x"]}}, df_index, stop_words=["Big"])
    assert pipeline.extractor.stop_words == frozenset(["Big"])
    assert pipeline.max_workers == 1


def test_save_writes_concatenated_vectors(pipeline, tmp_path):
    result = pipeline.run(LINES)
    path = tmp_path / "out" / "vectors.bin"
    written = pipeline.save(result, str(path))
    assert written == path.stat().st_size
    with open(path, "rb") as f:
        decoded = [r.vector for r in VectorCodec().iter_read(f)]
    assert decoded == result.vectors


def test_sample_dataset_runs():
    root = Path(__file__).resolve().parent.parent
    loader = CorpusLoader()
    cfg = AppConfig()
    df_index = loader.load_document_frequencies(
        str(root / "dataset" / "sample_document_frequencies.csv"),
        cfg.section('pipeline')['corpus_size'],
    )
    pipeline = TfIdfPipeline(
        TermFrequencyExtractor(cfg.section('extraction')['stop_words']),
        TfIdfScorer(df_index.corpus_size),
        df_index,
    )
    result = pipeline.run(loader.load_documents(str(root / "dataset" / "sample_documents.txt")))
    assert result.ok
    vectors = {v.doc_id: v for v in result.vectors}
    assert sorted(vectors) == [1, 2, 3, 4]
    assert "bigbut" in vectors[3].terms
    assert "bigger" not in vectors[3].terms
    assert vectors[4].terms[0] == "Hello"
    assert "co-op" not in vectors[4].terms


def test_from_config_null_max_workers_runs_inline(tmp_path, df_index):
    path = tmp_path / "config.yaml"
    path.write_text("execution:\n  max_workers: null\n", encoding="utf-8")
    pipeline = TfIdfPipeline.from_config(AppConfig(str(path)), df_index)
    assert pipeline.max_workers == 1
    assert [v.doc_id for v in pipeline.run(["1,Data"]).vectors] == [1]
