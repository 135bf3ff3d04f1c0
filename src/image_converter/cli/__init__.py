"""Command-line interface for image-converter."""
