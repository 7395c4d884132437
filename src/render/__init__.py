"""Render module for pay projection output display."""

from render.renderers import (
    BaseRenderer,
    JobDetailsRenderer,
    ComparisonRenderer,
    PayBreakdownRenderer,
    SwingOptionsRenderer,
    RENDERER_REGISTRY,
)

__all__ = [
    'BaseRenderer',
    'JobDetailsRenderer',
    'ComparisonRenderer',
    'PayBreakdownRenderer',
    'SwingOptionsRenderer',
    'RENDERER_REGISTRY',
]
