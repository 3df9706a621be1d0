"""Command line interface for md-reader."""
