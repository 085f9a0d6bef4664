"""Configuration models for the product handlers."""
