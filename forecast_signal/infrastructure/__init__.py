"""Infrastructure layer: concrete repositories."""
