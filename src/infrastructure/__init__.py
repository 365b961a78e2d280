"""Infrastructure adapters: database, settings, logging."""
