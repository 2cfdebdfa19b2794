"""Core contracts.

Why:
- Defines the structural contracts (Protocol) that products and adapters satisfy.
- Inverts dependencies: callers depend on capabilities, not concrete classes.
"""
