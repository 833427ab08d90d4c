"""FastAPI REST API for text chart rendering.

Usage:
    uvicorn textcharts.web:app --reload
"""

from textcharts.web.app import app, create_app

__all__ = ["app", "create_app"]
