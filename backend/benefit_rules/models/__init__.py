"""Data models for benefit rules."""
