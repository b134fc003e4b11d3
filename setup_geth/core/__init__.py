"""Setup pipeline."""

from .pipeline import PipelineResult, SetupPipeline, Stage

__all__ = ["PipelineResult", "SetupPipeline", "Stage"]
