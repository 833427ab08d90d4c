"""Contracts shared between the application and infrastructure layers."""

from .renderers import RendererProtocol

__all__ = ["RendererProtocol"]
