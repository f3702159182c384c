"""Profile building, similarity, scoring and selection."""
