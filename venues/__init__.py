"""Venues API — places, their gates/turnstiles, and scheduled events."""
__version__ = "1.0.0"
