"""Classic data structures and algorithms: trees, linked lists, complex numbers, sorting, searching and data generation."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "linkedlist",
    "intlist",
    "complexnum",
    "sorting",
    "search",
    "datagen",
]