"""Application wiring: launcher settings and host input names."""
