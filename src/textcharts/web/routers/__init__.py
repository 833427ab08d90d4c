"""API routers for the REST API."""

from textcharts.web.routers.data import router as data_router
from textcharts.web.routers.render import router as render_router

__all__ = ["data_router", "render_router"]
