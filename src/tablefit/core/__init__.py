"""Core configuration for tablefit."""
