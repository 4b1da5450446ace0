"""Artifact persistence and summaries."""
