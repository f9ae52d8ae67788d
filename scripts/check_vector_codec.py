"""
Check Vector Codec Script
Round-trip random vectors through the binary codec
"""

import sys
import os
import argparse
import random

from tqdm import tqdm

current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
sys.path.append(project_root)
from tfidf_pipeline.codec.vector_codec import VectorCodec
from tfidf_pipeline.config.config import AppConfig, DEFAULT_CONFIG_PATH
from tfidf_pipeline.utils.logger import setup_logger
from tfidf_pipeline.vectors.sparse_vector import SparseWeightVector

logger = setup_logger("check_vector_codec")


def random_vectors(terms, num_vectors: int, max_terms: int, rng: random.Random):
    """Generate vectors with random terms drawn from terms."""
    for doc_id in range(num_vectors):
        vector = SparseWeightVector(doc_id)
        for _ in range(rng.randint(1, max_terms)):
            vector.add(rng.choice(terms), rng.random())
        yield vector


def main():
    parser = argparse.ArgumentParser(description="Round-trip random vectors through the codec")
    parser.add_argument("--config", type=str, default=str(DEFAULT_CONFIG_PATH), help="Path to config file")
    parser.add_argument("--num-vectors", type=int, default=5)
    parser.add_argument("--max-terms", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true", help="Print every vector pair")
    args = parser.parse_args()

    # Use stop words as term set
    terms = AppConfig(args.config).section('extraction').get('stop_words') or []
    terms = list(terms) + ["Größe", "naïve", "\U0001F600"]
    rng = random.Random(args.seed)
    codec = VectorCodec()

    mismatches = 0
    vectors = list(random_vectors(terms, args.num_vectors, args.max_terms, rng))
    for vector in tqdm(vectors, desc="Round-tripping", unit="vector"):
        decoded = codec.decode(codec.encode(vector))
        if args.verbose:
            print(vector)
            print(decoded.vector)
            print("----")
        if not decoded.complete or decoded.vector != vector:
            mismatches += 1
            logger.error(f"Round trip failed for document {vector.doc_id}")

    logger.info(f"{len(vectors) - mismatches}/{len(vectors)} vectors round-tripped")
    return 1 if mismatches else 0


if __name__ == "__main__":
    sys.exit(main())
