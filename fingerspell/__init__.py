"""ASL finger-spelling recognition from hand landmarks and skin-colour regions."""

__version__ = "0.1.0"
