"""Core action layer and exception hierarchy."""
