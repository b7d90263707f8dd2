"""Locale fallback chains over localization bundles, with pseudolocalization."""

__version__ = "0.7.2"

__all__ = ["bundles", "cache", "env", "errors", "generator", "localization", "pseudo", "types"]