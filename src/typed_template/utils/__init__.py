"""Utility helpers."""

from typed_template.utils.logger import setup_logger

__all__ = ["setup_logger"]
