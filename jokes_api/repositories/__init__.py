"""
Persistence adapters.

The dataset is a static JSON file read once at startup. Services receive the
loaded sequence and never touch the file themselves.
"""
