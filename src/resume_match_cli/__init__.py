"""Command-line interface for resume-match."""
