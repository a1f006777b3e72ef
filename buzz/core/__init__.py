"""Core modules for buzz."""
