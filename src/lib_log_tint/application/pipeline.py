"""Pipeline wiring and the lock-guarded handle to the active pipeline.

Purpose
-------
Freeze the processor order (transform → style → error fallback → extras) and
the renderer into one immutable object exposing :meth:`Pipeline.colorize`, and
provide :class:`PipelineHandle` so writers can read the active pipeline while
configuration code swaps it wholesale.

Contents
--------
* :class:`Pipeline` - parse → process → render for one line.
* :class:`PipelineHandle` - readers/writer guarded reference to a pipeline.

System Role
-----------
The runtime keeps one process-wide handle; the colorizing writer reads it on
every line. Theme and profile are baked in at construction, so reconfiguring
means building a new pipeline and swapping it in.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Callable, Iterable

from lib_log_tint.domain.parsing import parse_text_log_line
from lib_log_tint.domain.profile import Profile
from lib_log_tint.domain.themes import Theme, default_theme

from .ports.hooks import FieldStyleProvider, FieldTransformer, Processor, Renderer
from .processors import ErrorFieldProcessor, FieldStyleProcessor, FieldTransformProcessor, as_processor
from .rendering import DefaultRenderer, RendererFunc


class Pipeline:
    """Immutable processor chain plus renderer.

    Examples
    --------
    >>> from lib_log_tint.domain.style import strip_ansi
    >>> strip_ansi(Pipeline().colorize('level=INFO msg="Listener running." addr=[::]:19132'))
    'INF "Listener running." addr=[::]:19132'
    """

    __slots__ = ("_processors", "_renderer")

    def __init__(
        self,
        theme: Theme | None = None,
        profile: Profile | None = None,
        provider: FieldStyleProvider | None = None,
        transformer: FieldTransformer | None = None,
        extras: Iterable[Processor | Callable] = (),
        renderer: Renderer | Callable | None = None,
    ) -> None:
        resolved_theme = theme if theme is not None else default_theme()
        self._processors: tuple[Processor, ...] = (
            FieldTransformProcessor(transformer),
            FieldStyleProcessor(provider),
            ErrorFieldProcessor(resolved_theme.err_key),
            *(as_processor(extra) for extra in extras),
        )
        if renderer is None:
            self._renderer: Renderer = DefaultRenderer(resolved_theme, profile)
        elif hasattr(renderer, "render"):
            self._renderer = renderer  # type: ignore[assignment]
        else:
            self._renderer = RendererFunc(renderer)

    @classmethod
    def default(cls) -> "Pipeline":
        """Return the pipeline used before any configuration is applied."""

        return cls()

    @property
    def processors(self) -> tuple[Processor, ...]:
        return self._processors

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    def colorize(self, line: str) -> str:
        """Parse ``line``, run every processor in order, and render the result."""

        record = parse_text_log_line(line)
        for processor in self._processors:
            processor.process(record)
        return self._renderer.render(record)


class _ReadWriteLock:
    """Many concurrent readers or one exclusive writer."""

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._condition:
            while self._writing:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._condition:
            while self._writing or self._readers:
                self._condition.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._condition:
                self._writing = False
                self._condition.notify_all()


class PipelineHandle:
    """Shared reference to the active :class:`Pipeline`.

    Readers take the shared lock to fetch the current reference;
    :meth:`swap` takes the exclusive lock to replace the reference.

    Examples
    --------
    >>> handle = PipelineHandle()
    >>> previous = handle.swap(Pipeline(renderer=lambda record: record.message))
    >>> handle.colorize("msg=hello level=INFO")
    'hello'
    """

    __slots__ = ("_lock", "_pipeline")

    def __init__(self, pipeline: Pipeline | None = None) -> None:
        self._lock = _ReadWriteLock()
        self._pipeline = pipeline if pipeline is not None else Pipeline.default()

    @property
    def pipeline(self) -> Pipeline:
        with self._lock.read():
            return self._pipeline

    def swap(self, pipeline: Pipeline) -> Pipeline:
        """Install ``pipeline`` and return the one it replaces."""

        with self._lock.write():
            previous, self._pipeline = self._pipeline, pipeline
        return previous

    def colorize(self, line: str) -> str:
        with self._lock.read():
            pipeline = self._pipeline
        return pipeline.colorize(line)


__all__ = ["Pipeline", "PipelineHandle"]
