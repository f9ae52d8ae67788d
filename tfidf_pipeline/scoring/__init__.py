"""
Scoring Module
Document frequencies and tf-idf weights
"""
from .document_frequency import DocumentFrequencyIndex, DocumentFrequencyRecord
from .tfidf_scorer import TfIdfScorer, TfIdfScoredRecord

__all__ = [
    "DocumentFrequencyIndex",
    "DocumentFrequencyRecord",
    "TfIdfScorer",
    "TfIdfScoredRecord",
]
