"""
Codec Module
Binary wire format of weight vectors
"""
from .vector_codec import VectorCodec, DecodeResult

__all__ = ["VectorCodec", "DecodeResult"]
