"""Application layer: parsing, binding, hook pipeline, declarations, reporting."""
