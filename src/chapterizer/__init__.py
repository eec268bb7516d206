"""Split paginated documents into chapters for downstream summarization."""

__version__ = "0.1.0"
