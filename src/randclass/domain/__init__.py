"""Domain layer: loaded-module models, class classification, random selection.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
