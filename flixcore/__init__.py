"""Movie catalogue core: metadata, CSV storage, sorting, selection and covers."""

__version__ = "0.1.0"
__all__ = ["cover", "csvio", "movie", "sorting", "selection", "imaging"]