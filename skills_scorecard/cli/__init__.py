"""Command-line interface for the skills scorecard."""
