"""Domain layer — pages, links, command grammar, and error codes.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
