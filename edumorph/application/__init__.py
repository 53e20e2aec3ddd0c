"""
Application layer - prompts, response normalization and feature use cases.
"""
