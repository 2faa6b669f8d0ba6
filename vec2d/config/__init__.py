"""Runtime configuration for vec2d."""
