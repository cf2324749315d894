"""Core settings and logging helpers."""
