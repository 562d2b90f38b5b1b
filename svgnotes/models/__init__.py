"""Typed document model: colors, points, shapes, elements, documents."""
