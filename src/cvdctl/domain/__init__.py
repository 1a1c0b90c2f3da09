"""Domain layer — colors, CVD simulation, distance, validation and scoring.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
