"""Domain models and entities.

Why:
- Plain, strict data structures (Pydantic v2) live here.
- The domain knows nothing about HTTP or the CLI: only the concepts of the problem.
"""
