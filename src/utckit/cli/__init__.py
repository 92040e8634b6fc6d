"""Command-line interface for utckit."""
