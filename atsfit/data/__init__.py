"""
Data layer for atsfit.

Submodules:
- models: immutable Pydantic profile and result models
"""
