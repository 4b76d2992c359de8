"""Application layer: pipeline stages, rendering, and use cases."""

from __future__ import annotations

from .errors import LibLogTintError, RotationError
from .pipeline import Pipeline, PipelineHandle
from .processors import (
    ErrorFieldProcessor,
    FieldStyleFunc,
    FieldStyleProcessor,
    FieldTransformFunc,
    FieldTransformProcessor,
    ProcessorFunc,
    StaticFieldProvider,
    StaticFieldTransformer,
)
from .rendering import DefaultRenderer, RendererFunc

__all__ = [
    "DefaultRenderer",
    "ErrorFieldProcessor",
    "FieldStyleFunc",
    "FieldStyleProcessor",
    "FieldTransformFunc",
    "FieldTransformProcessor",
    "LibLogTintError",
    "Pipeline",
    "PipelineHandle",
    "ProcessorFunc",
    "RendererFunc",
    "RotationError",
    "StaticFieldProvider",
    "StaticFieldTransformer",
]
