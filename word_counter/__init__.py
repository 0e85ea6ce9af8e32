"""Multilingual word counter.

Counts words while treating translations of the same concept as one word:
"flower", "flor" and "blume" all land on the same counter.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
