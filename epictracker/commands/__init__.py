"""Command handlers for the et CLI. Each takes parsed args and a TrackerDatabase."""
