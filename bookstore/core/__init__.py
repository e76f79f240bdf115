"""Catalog core."""
