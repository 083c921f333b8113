"""PetSwap API: holiday house swaps for people with pets."""

__version__ = "0.1.0"
