"""Sullivan — procedural architectural ornament, from parameters to SVG."""

__version__ = "0.1.0"
