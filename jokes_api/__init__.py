"""Joke API: serves random or indexed jokes from a static JSON dataset."""
