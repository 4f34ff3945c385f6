"""Rich console output for the oaiclient CLI."""
