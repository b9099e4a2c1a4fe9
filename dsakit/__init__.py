"""Classic data structures and algorithms: searching, bounded arrays, array
problems, set operations, linked lists, compact matrices, recursion, strings
and grids."""

__version__ = "0.1.0"