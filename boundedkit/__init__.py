"""Fixed-capacity containers, a linear arena allocator and an AVL tree."""

__version__ = "0.1.0"