"""Resume Shortlist package."""

__all__ = [
    "main",
    "config",
    "models",
    "exceptions",
    "extractor",
    "synthesizer",
    "scorer",
    "ranker",
    "export",
    "session",
    "utils",
]
