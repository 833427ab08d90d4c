"""FastAPI dependency injection for render services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from textcharts.application import RenderChartCommand


@lru_cache(maxsize=1)
def get_render_command() -> RenderChartCommand:
    """Get cached RenderChartCommand instance."""
    return RenderChartCommand()


RenderCommandDep = Annotated[RenderChartCommand, Depends(get_render_command)]
