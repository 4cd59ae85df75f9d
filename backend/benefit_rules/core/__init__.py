"""Core enums and logging setup."""
