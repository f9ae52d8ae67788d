"""
Inspect Vectors Script
Decode a file of encoded weight vectors and print them
"""

import sys
import os
import argparse
import json

current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
sys.path.append(project_root)
from tfidf_pipeline.codec.vector_codec import VectorCodec
from tfidf_pipeline.utils.logger import setup_logger

logger = setup_logger("inspect_vectors")


def main():
    parser = argparse.ArgumentParser(description="Print encoded weight vectors")
    parser.add_argument("path", type=str, help="File written by main.py")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per vector")
    args = parser.parse_args()

    if not os.path.exists(args.path):
        logger.error(f"File not found: {args.path}")
        return 1

    codec = VectorCodec()
    count = 0
    complete = True
    with open(args.path, "rb") as f:
        for result in codec.iter_read(f):
            count += 1
            if args.json:
                print(json.dumps(dict(result.vector.to_dict(), complete=result.complete), ensure_ascii=False))
            else:
                print(result.vector)
            complete = result.complete

    if not complete:
        logger.warning(f"Last vector in {args.path} is truncated")
        return 2
    logger.info(f"Read {count} vectors from {args.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
