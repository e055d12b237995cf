"""Domain layer — types, thresholds, validation, and classification.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
