"""
Infrastructure layer - model backend, storage, configuration and middleware.
"""
