"""Error taxonomy shared by every pipeline stage."""

from __future__ import annotations


class PipelineError(Exception):
    """Base exception for pipeline failures.

    Attributes:
        stage: Pipeline stage that failed (validation, extraction, ...).
        provider: Provider label when the failure is provider-specific.
    """

    default_stage = "pipeline"

    def __init__(
        self,
        message: str,
        *,
        stage: str | None = None,
        provider: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage or self.default_stage
        self.provider = provider

    def __str__(self) -> str:
        return self.message


class ValidationError(PipelineError):
    """Missing or malformed input."""

    default_stage = "validation"


class ExtractionFailure(PipelineError):
    """Fetching a page failed or it yielded too little readable text."""

    default_stage = "extraction"


class ProviderUnavailable(PipelineError):
    """The selected model's provider has no usable credential."""

    default_stage = "enhancement"


class ProviderError(PipelineError):
    """The upstream completion call failed or returned unusable data."""

    default_stage = "enhancement"

    def __init__(self, message: str, *, provider: str, stage: str | None = None) -> None:
        super().__init__(f"{provider} processing failed: {message}", stage=stage, provider=provider)


class RenderFailure(PipelineError):
    """The headless renderer could not produce a document."""

    default_stage = "rendering"


__all__ = [
    "PipelineError",
    "ValidationError",
    "ExtractionFailure",
    "ProviderUnavailable",
    "ProviderError",
    "RenderFailure",
]
