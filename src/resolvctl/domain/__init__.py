"""Domain layer: option codec, configuration items, and the aggregate.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
