"""Classic algorithms and data structures: caches, bits, backtracking, segment trees, union-find and graph searches."""

__version__ = "0.1.0"