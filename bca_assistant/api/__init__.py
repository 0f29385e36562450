"""HTTP API for the BCA study assistant."""
