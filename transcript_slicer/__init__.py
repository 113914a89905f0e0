"""Slice long YouTube transcripts into token-budget sized pieces."""

__version__ = "0.1.0"
