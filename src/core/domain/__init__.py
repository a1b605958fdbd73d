"""Domain values.

Why:
- Pure, strict data structures (Pydantic v2) and small pure rules live here.
- The domain knows nothing about subprocess or the CLI: only what to run.
"""
