class ConfigError(ValueError):
    """Raised when a configuration value or file is invalid."""


class CameraError(RuntimeError):
    """Raised when the capture device cannot be opened."""
