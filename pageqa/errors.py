from __future__ import annotations


class PipelineError(Exception):
    """Failure of one stage of the page -> answer pipeline."""

    stage = "pipeline"

    def __init__(self, message: str, *, stage: str | None = None) -> None:
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class InvalidArgumentError(PipelineError, ValueError):
    stage = "chunk"


class NetworkError(PipelineError):
    stage = "fetch"


class StoreError(PipelineError):
    stage = "store"


class GenerationError(PipelineError):
    stage = "generate"
