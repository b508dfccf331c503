"""Common base classes and utilities for core functionality."""

from .base_converter import BaseTreeConverter

__all__ = ["BaseTreeConverter"]
