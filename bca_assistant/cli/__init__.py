"""Command-line interface for the BCA study assistant."""
