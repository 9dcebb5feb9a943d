"""Text processing pipelines."""
