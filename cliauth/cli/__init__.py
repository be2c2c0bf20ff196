"""Command line interface for cliauth."""
