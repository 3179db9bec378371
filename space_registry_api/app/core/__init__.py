"""Core infrastructure: configuration, logging, errors and SQLite access."""
