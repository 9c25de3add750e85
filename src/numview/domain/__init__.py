"""Domain layer: value types, parsing, and pure derivations.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
"""
