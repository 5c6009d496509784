"""Infrastructure — process-level concerns (logging)."""
