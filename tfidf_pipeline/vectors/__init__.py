"""
Vectors Module
Sparse weight vectors and their aggregation
"""
from .sparse_vector import SparseWeightVector, DEFAULT_DOC_ID
from .aggregator import VectorAggregator

__all__ = ["SparseWeightVector", "DEFAULT_DOC_ID", "VectorAggregator"]
