"""Load locations and distances into a bidirectional graph and print its nodes."""

__version__ = "0.1.0"
__all__ = ["cli", "graph", "models", "parsers"]