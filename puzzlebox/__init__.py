"""Solutions to classic algorithm puzzles over strings, sequences, arrays, grids, lists, trees and task schedules."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "grids",
    "linked_lists",
    "scheduling",
    "sequences",
    "strings",
    "trees",
]