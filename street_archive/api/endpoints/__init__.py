"""HTTP endpoint modules."""
