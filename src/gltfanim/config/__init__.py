"""Importer configuration."""
