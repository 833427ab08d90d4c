"""Renderer registry and chart-kind dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import ClassVar

from textcharts.contracts import RendererProtocol
from textcharts.domain import Artifact, ChartKind, Record, StyleParameters

logger = logging.getLogger(__name__)


class UnsupportedChartKindError(KeyError):
    """Raised when no renderer is registered for a chart kind."""

    def __init__(self, kind: str, available: list[str]) -> None:
        self.kind = kind
        self.available = available
        super().__init__(kind)

    def __str__(self) -> str:
        return (
            f"No renderer registered for chart kind '{self.kind}'. "
            f"Available kinds: {', '.join(self.available) or 'none'}"
        )


class RendererRegistry:
    """Registry of renderer functions keyed by chart kind.

    Renderers register themselves with the ``@RendererRegistry.register``
    decorator when their module is imported.

    Example:
        @RendererRegistry.register(ChartKind.AREA)
        def render_area(records, style):
            ...
    """

    _renderers: ClassVar[dict[ChartKind, RendererProtocol]] = {}

    @classmethod
    def register(
        cls, kind: ChartKind
    ) -> Callable[[RendererProtocol], RendererProtocol]:
        """Decorator to register a renderer for ``kind``."""

        def decorator(renderer: RendererProtocol) -> RendererProtocol:
            if kind in cls._renderers:
                logger.warning(f"Overwriting existing renderer for kind '{kind.value}'")
            cls._renderers[kind] = renderer
            logger.debug(
                f"Registered renderer '{kind.value}': "
                f"{getattr(renderer, '__name__', repr(renderer))}"
            )
            return renderer

        return decorator

    @classmethod
    def get(cls, kind: ChartKind | str) -> RendererProtocol:
        """Look up the renderer for a chart kind.

        Raises:
            UnsupportedChartKindError: If the kind is unknown or unregistered.
        """
        try:
            resolved = ChartKind.parse(kind)
        except ValueError:
            raise UnsupportedChartKindError(str(kind), cls.available_kinds())
        if resolved not in cls._renderers:
            raise UnsupportedChartKindError(resolved.value, cls.available_kinds())
        return cls._renderers[resolved]

    @classmethod
    def available_kinds(cls) -> list[str]:
        return sorted(kind.value for kind in cls._renderers)

    @classmethod
    def is_registered(cls, kind: ChartKind | str) -> bool:
        try:
            return ChartKind.parse(kind) in cls._renderers
        except ValueError:
            return False


def render(
    kind: ChartKind | str,
    records: Sequence[Record],
    style: StyleParameters | None = None,
) -> Artifact:
    """Render ``records`` as a chart of the given kind.

    Args:
        kind: Chart kind or its name.
        records: Non-empty dataset in display order.
        style: Style parameters; defaults apply when omitted.

    Returns:
        The rendered artifact. Glyph precondition failures come back as an
        error artifact rather than an exception.

    Raises:
        UnsupportedChartKindError: If no renderer handles ``kind``.
    """
    renderer = RendererRegistry.get(kind)
    return renderer(records, style or StyleParameters())
