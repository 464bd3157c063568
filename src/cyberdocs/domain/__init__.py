"""Domain layer: document definitions and the errors they raise.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
