"""Optional plotting helpers (require matplotlib)."""
