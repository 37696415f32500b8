"""Domain layer — calendar types, parts, zones, and boundaries.

This layer depends only on stdlib, pydantic, and :mod:`dtutil.errors`.
It must never import from services or config.
"""
