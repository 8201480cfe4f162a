"""
Use cases for the joke API.

Routers call these services instead of indexing into the dataset directly.
"""
