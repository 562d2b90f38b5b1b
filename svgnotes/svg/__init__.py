"""SVG text <-> (tag, attributes) events, and attribute lookups."""
