"""Shared utilities: logging setup and ID generation. No business logic."""
