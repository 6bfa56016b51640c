"""Blackjack against a dealer, at the terminal or over HTTP."""

__version__ = "0.1.0"