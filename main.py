"""
Main script to build TF-IDF weight vectors
Loads config, runs documents through the pipeline and writes the encoded vectors
"""
import sys
import os
import argparse

# Add project root to path
current_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.append(current_dir)

from tfidf_pipeline.config.config import AppConfig, DEFAULT_CONFIG_PATH, resolve_path
from tfidf_pipeline.data.dataloader import CorpusLoader
from tfidf_pipeline.pipelines.build_pipeline import TfIdfPipeline
from tfidf_pipeline.utils.logger import setup_logger, set_level

logger = setup_logger("main")


def main():
    parser = argparse.ArgumentParser(description="Build TF-IDF weight vectors")
    parser.add_argument(
        "--config",
        type=str,
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to config file"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file for encoded vectors (default: pipeline.output.vectors_path)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: logging.level from config)"
    )
    args = parser.parse_args()

    # 1. Load configuration
    try:
        cfg = AppConfig(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load config: {e}")
        return 1

    log_level = args.log_level or cfg.section('logging').get('level', 'INFO')
    set_level(log_level)

    pipeline_config = cfg.section('pipeline')
    data_config = cfg.section('pipeline', 'data')
    output_config = cfg.section('pipeline', 'output')

    corpus_size = pipeline_config.get('corpus_size')
    if corpus_size is None:
        logger.error("pipeline.corpus_size is not set")
        return 1

    documents_path = resolve_path(data_config.get('documents_path', './dataset/sample_documents.txt'), current_dir)
    df_path = resolve_path(data_config.get('document_frequencies_path',
                                           './dataset/sample_document_frequencies.csv'), current_dir)
    output_path = args.output or resolve_path(output_config.get('vectors_path', './output/weight_vectors.bin'),
                                              current_dir)

    logger.info("=" * 60)
    logger.info("Building TF-IDF weight vectors")
    logger.info("=" * 60)
    logger.info(f"  - Documents: {documents_path}")
    logger.info(f"  - Document frequencies: {df_path}")
    logger.info(f"  - Corpus size: {corpus_size}")
    logger.info(f"  - Output: {output_path}")

    # 2. Load inputs
    loader = CorpusLoader()
    try:
        documents = loader.load_documents(documents_path)
        df_index = loader.load_document_frequencies(df_path, corpus_size)
        stop_words = None
        stop_words_path = cfg.section('extraction').get('stop_words_path')
        if stop_words_path:
            stop_words = loader.load_stop_words(resolve_path(stop_words_path, current_dir))
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load inputs: {e}")
        return 1

    # 3. Run pipeline
    pipeline = TfIdfPipeline.from_config(cfg, df_index, stop_words=stop_words)
    result = pipeline.run(documents)
    pipeline.save(result, output_path)

    for failure in result.failures:
        logger.warning(f"Skipped line {failure.line_number}: {failure.reason}")
    logger.info(f"Done: {len(result.vectors)} vectors written to {output_path}")
    return 0 if result.ok else 2


if __name__ == "__main__":
    sys.exit(main())
