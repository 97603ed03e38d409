"""WordLens keyword occurrence and highlighting service."""

__version__ = "1.0.0"
