"""
Pipeline: end-to-end orchestration of an eligibility run.
"""

from .runner import PipelineResult, load_sources, run_pipeline

__all__ = ["PipelineResult", "load_sources", "run_pipeline"]
