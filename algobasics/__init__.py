"""Elementary sorts, binary-search routines and a randomised cross-check of the sorts."""

__version__ = "0.1.0"
__all__ = ["sorting", "search", "validator"]