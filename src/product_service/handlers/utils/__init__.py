"""Shared handler utilities: observability, errors, responses, metrics and middlewares."""
