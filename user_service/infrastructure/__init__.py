"""Infrastructure layer: persistence."""
