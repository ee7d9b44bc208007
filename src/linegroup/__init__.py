"""linegroup - group delimited records that share column values."""

__version__ = "0.1.0"
