"""Infrastructure layer - database wiring and logging."""
