"""
Data Module
Load documents, document frequencies and stop words
"""

from .dataloader import CorpusLoader

__all__ = [
    "CorpusLoader",
]
