class PreferenceResolverError(Exception):
    """Base exception for preference resolver."""


class EmptyCollectionError(PreferenceResolverError):
    """Raised when the most-recent fallback is asked to pick from no elements."""


class ConfigurationError(PreferenceResolverError):
    """Raised when resolver configuration is missing or invalid."""
