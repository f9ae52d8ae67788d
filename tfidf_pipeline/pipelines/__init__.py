"""
Pipelines Module
End-to-end weight vector pipeline
"""
from .build_pipeline import TfIdfPipeline, PipelineResult, DocumentFailure

__all__ = ["TfIdfPipeline", "PipelineResult", "DocumentFailure"]
