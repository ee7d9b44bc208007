from .source import SourcePort

__all__ = ["SourcePort"]
