import math

import pytest

from tfidf_pipeline.errors import JoinContractViolation
from tfidf_pipeline.extraction.term_frequency import TermFrequencyRecord
from tfidf_pipeline.scoring.document_frequency import DocumentFrequencyIndex, DocumentFrequencyRecord
from tfidf_pipeline.scoring.tfidf_scorer import TfIdfScorer, TfIdfScoredRecord


def test_score_example():
    scorer = TfIdfScorer(corpus_size=10)
    scored = scorer.score(TermFrequencyRecord(1, "Big", 3), DocumentFrequencyRecord("Big", 2))
    assert scored == TfIdfScoredRecord(1, "Big", pytest.approx(3 * math.log(5)))
    assert scored.weight == pytest.approx(4.8283137373, abs=1e-9)


def test_idf_uses_true_division():
    scorer = TfIdfScorer(corpus_size=10)
    assert scorer.idf(3) == pytest.approx(math.log(10 / 3))


def test_term_in_every_document_weighs_zero():
    scorer = TfIdfScorer(corpus_size=4)
    scored = scorer.score(TermFrequencyRecord(1, "Data", 5), DocumentFrequencyRecord("Data", 4))
    assert scored.weight == 0.0


@pytest.mark.parametrize("count", [0, -1, 11])
def test_document_count_out_of_range_fails(count):
    scorer = TfIdfScorer(corpus_size=10)
    with pytest.raises(JoinContractViolation) as exc_info:
        scorer.score(TermFrequencyRecord(3, "Big", 1), DocumentFrequencyRecord("Big", count))
    assert exc_info.value.doc_id == 3
    assert exc_info.value.term == "Big"
    assert "doc_id=3" in str(exc_info.value)


def test_join_key_mismatch_fails():
    scorer = TfIdfScorer(corpus_size=10)
    with pytest.raises(JoinContractViolation):
        scorer.score(TermFrequencyRecord(1, "Big", 1), DocumentFrequencyRecord("big", 1))


@pytest.mark.parametrize("corpus_size", [0, -3, 2.5, True])
def test_invalid_corpus_size(corpus_size):
    with pytest.raises(ValueError):
        TfIdfScorer(corpus_size=corpus_size)


def test_join_drops_unmatched_terms(df_index):
    scorer = TfIdfScorer(corpus_size=4)
    tf_records = [
        TermFrequencyRecord(1, "Big", 3),
        TermFrequencyRecord(1, "unseen", 2),
        TermFrequencyRecord(2, "Big", 1),
        TermFrequencyRecord(2, "big", 1),
    ]
    scored = list(scorer.join(tf_records, df_index))
    assert [(r.doc_id, r.term) for r in scored] == [(1, "Big"), (2, "Big")]
    assert scored[0].weight == pytest.approx(3 * math.log(2))


def test_join_default_idf_for_unmatched_terms(df_index):
    scorer = TfIdfScorer(corpus_size=4, default_idf=1.5)
    scored = list(scorer.join([TermFrequencyRecord(1, "unseen", 2)], df_index))
    assert scored == [TfIdfScoredRecord(1, "unseen", 3.0)]


def test_join_raises_violation_by_default():
    scorer = TfIdfScorer(corpus_size=4)
    index = DocumentFrequencyIndex({"Big": 0}, corpus_size=4)
    with pytest.raises(JoinContractViolation):
        list(scorer.join([TermFrequencyRecord(1, "Big", 1)], index))


def test_join_reports_violation_and_continues():
    scorer = TfIdfScorer(corpus_size=4)
    index = DocumentFrequencyIndex({"Big": 0, "Data": 1}, corpus_size=4)
    violations = []
    scored = list(scorer.join(
        [TermFrequencyRecord(1, "Big", 1), TermFrequencyRecord(1, "Data", 1)],
        index,
        on_violation=violations.append,
    ))
    assert [r.term for r in scored] == ["Data"]
    assert len(violations) == 1
    assert violations[0].term == "Big"


def test_document_frequency_index():
    index = DocumentFrequencyIndex.from_records(
        [DocumentFrequencyRecord("Big", 2), DocumentFrequencyRecord("Data", 1)], corpus_size=3
    )
    assert len(index) == 2
    assert "Big" in index
    assert index.lookup("Big") == DocumentFrequencyRecord("Big", 2)
    assert index.lookup("missing") is None
    assert list(index.records()) == [DocumentFrequencyRecord("Big", 2), DocumentFrequencyRecord("Data", 1)]
    with pytest.raises(TypeError):
        index.frequencies["Big"] = 5


def test_document_frequency_index_rejects_duplicate_terms():
    with pytest.raises(ValueError):
        DocumentFrequencyIndex.from_records(
            [DocumentFrequencyRecord("Big", 2), DocumentFrequencyRecord("Big", 1)], corpus_size=3
        )


def test_join_rejects_corpus_size_mismatch():
    scorer = TfIdfScorer(corpus_size=10)
    index = DocumentFrequencyIndex({"Big": 8}, corpus_size=4)
    with pytest.raises(JoinContractViolation) as exc_info:
        list(scorer.join([TermFrequencyRecord(1, "Big", 1)], index))
    assert "corpus size" in str(exc_info.value)


def test_join_corpus_size_mismatch_is_not_passed_to_on_violation():
    scorer = TfIdfScorer(corpus_size=10)
    index = DocumentFrequencyIndex({"Big": 2}, corpus_size=4)
    violations = []
    with pytest.raises(JoinContractViolation):
        list(scorer.join([TermFrequencyRecord(1, "Big", 1)], index, on_violation=violations.append))
    assert violations == []
