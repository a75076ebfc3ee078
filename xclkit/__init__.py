"""Containers, 128-bit integers, a red-black tree, thread handles, clocks and atomic cells."""

__version__ = "2.2.2"

__all__ = [
    "atomic",
    "int128",
    "slice_list",
    "sorted_tree",
    "system",
    "thread",
    "vector",
]