"""Infrastructure concerns shared across layers."""
