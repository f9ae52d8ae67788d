"""
TF-IDF weight vector pipeline
"""
from .errors import (
    TfIdfPipelineError,
    ParseError,
    JoinContractViolation,
    DecodeError,
    TruncatedInput,
    EncodingOverflow,
)
from .extraction import TermFrequencyExtractor, TermFrequencyRecord
from .scoring import DocumentFrequencyIndex, DocumentFrequencyRecord, TfIdfScorer, TfIdfScoredRecord
from .vectors import SparseWeightVector, VectorAggregator
from .codec import VectorCodec, DecodeResult
from .pipelines import TfIdfPipeline, PipelineResult, DocumentFailure

__version__ = "0.1.0"

__all__ = [
    "TfIdfPipelineError",
    "ParseError",
    "JoinContractViolation",
    "DecodeError",
    "TruncatedInput",
    "EncodingOverflow",
    "TermFrequencyExtractor",
    "TermFrequencyRecord",
    "DocumentFrequencyIndex",
    "DocumentFrequencyRecord",
    "TfIdfScorer",
    "TfIdfScoredRecord",
    "SparseWeightVector",
    "VectorAggregator",
    "VectorCodec",
    "DecodeResult",
    "TfIdfPipeline",
    "PipelineResult",
    "DocumentFailure",
]
