"""Declarative enums with data-carrying variants and the utilities derived from them."""

__version__ = "0.1.0"
__all__ = [
    "model",
    "strings",
    "iteration",
    "discriminants",
    "from_repr",
    "messages",
    "table",
    "try_as",
]