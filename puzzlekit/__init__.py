"""Solutions to classic array, string, bit, tree, linked-list and graph puzzles."""

__version__ = "0.1.0"
__all__ = ["arrays", "bits", "strings", "trees", "linked", "graphs"]