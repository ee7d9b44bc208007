"""Bundled sample datasets, resolvable by bare file name."""
