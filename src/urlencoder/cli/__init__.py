"""Command-line interface for urlencoder."""
