"""Classic algorithms for graphs, optimisation, geometry, sorting and strings."""

__version__ = "0.1.0"