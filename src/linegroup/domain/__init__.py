from .errors import (
    ConfigurationError,
    LineGroupError,
    SourceNotFoundError,
)
from .models import ProcessResult, Row, render_row
from .union_find import UnionFind

__all__ = [
    "ConfigurationError",
    "LineGroupError",
    "ProcessResult",
    "Row",
    "SourceNotFoundError",
    "UnionFind",
    "render_row",
]
