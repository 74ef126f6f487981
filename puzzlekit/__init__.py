"""Solutions to classic puzzles over arrays, text, grids, trees and friend graphs."""

__version__ = "0.1.0"
__all__ = ["arrays", "dynamic", "text", "grids", "trees", "social"]