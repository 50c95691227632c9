"""Core infrastructure: XDG paths, configuration and logging setup."""
