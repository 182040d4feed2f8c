"""Command-line interface for selector_builder."""
