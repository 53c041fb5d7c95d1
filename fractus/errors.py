"""Exceptions raised by the configuration layer."""


class ConfigError(ValueError):
    """A configuration value cannot produce a well-formed frame."""
