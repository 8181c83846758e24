"""Artifact schemas and output path conventions."""
