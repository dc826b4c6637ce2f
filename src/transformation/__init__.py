"""
Transformation Layer - Pure, Deterministic Functions

This layer contains the handbook exercises.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results
"""
