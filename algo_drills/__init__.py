"""Solutions to classic data-structure and sorting exercises.

Linked lists, stacks, segment trees, heaps, selection, intervals, partitioning,
counting problems, a substitution cipher and word-pair counting.
"""

__version__ = "0.1.0"