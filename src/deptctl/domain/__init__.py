"""Domain layer: tokenizer, command grammar, directory, and line search.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
