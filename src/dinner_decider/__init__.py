"""Dinner Decider.

A small service that tracks refrigerator ingredients and asks a local
Ollama model for dinner suggestions.
"""

__version__ = "0.1.0"
