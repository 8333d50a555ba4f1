"""Graph algorithms over a small graph protocol: traversal, vertex degrees, cycle detection, shortest paths, strongly connected components and DOT export."""

__version__ = "0.1.0"

__all__ = ["components", "cycles", "dot", "paths", "properties", "traversal", "types"]