"""relgraph - relationship queries over a labeled family graph."""

__version__ = "0.1.0"
