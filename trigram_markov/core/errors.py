# errors.py - exceptions raised by the markov engine


class ConfigError(ValueError):
    """Raised when a normalizer/model configuration is rejected at construction time."""
