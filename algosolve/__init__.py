"""Classic algorithm solutions over linked lists, arrays, strings, numbers, matrices and expressions."""

__version__ = "0.1.0"