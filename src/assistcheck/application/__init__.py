"""assistcheck application layer: collection, resolution, emission, reporting."""
