"""Vocabulary tracker service with daily Word of the Day push notifications."""

__version__ = "0.1.0"
