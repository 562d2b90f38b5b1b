"""Geometry and number formatting helpers."""
