"""
Extraction Module
Per-document term frequency extraction
"""
from .term_frequency import TermFrequencyExtractor, TermFrequencyRecord

__all__ = ["TermFrequencyExtractor", "TermFrequencyRecord"]
