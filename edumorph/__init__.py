"""EduMorph: AI-assisted learning service."""

__version__ = "1.0.0"
