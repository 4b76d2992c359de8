"""Application-layer ports (protocols) implemented by adapters and hooks."""

from __future__ import annotations

from .console import ConsolePort
from .hooks import FieldStyleProvider, FieldTransformer, Processor, Renderer
from .sink import SinkPort
from .time import ClockPort

__all__ = [
    "ClockPort",
    "ConsolePort",
    "FieldStyleProvider",
    "FieldTransformer",
    "Processor",
    "Renderer",
    "SinkPort",
]
