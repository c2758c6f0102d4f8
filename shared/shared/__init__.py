"""Shared building blocks for the Apogee insurance services."""
