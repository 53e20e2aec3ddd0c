"""Configuration: settings, logging and dependency providers."""
