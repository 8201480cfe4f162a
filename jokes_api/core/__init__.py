"""
Core utilities shared across the joke API.

For now this only hosts configuration; routers and services read settings
from here instead of the environment.
"""
