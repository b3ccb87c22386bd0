"""salesaudit: validate point-of-sale logs and report monthly sales."""

__version__ = "0.1.0"
