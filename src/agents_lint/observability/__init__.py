"""Metrics hooks for the parser and validator.

The library never talks to a metrics backend itself. Pass a
``MetricsHook`` implementation to ``validate`` or ``parse_markdown``
to receive timings, counts and the final score.
"""

from . import names
from .base import MetricsHook, NoOpMetricsHook

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
