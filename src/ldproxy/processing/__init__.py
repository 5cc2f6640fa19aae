"""Token stream transformations."""
