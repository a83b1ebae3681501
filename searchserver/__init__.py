"""In-memory TF-IDF document search with stop words, minus words, pagination and a request log."""

__version__ = "0.1.0"