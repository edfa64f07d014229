"""Command-line interface for the embedding pipeline."""
