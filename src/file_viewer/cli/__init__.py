"""Command line interface and interactive viewer."""
