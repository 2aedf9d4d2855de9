"""Runnable examples of creational, structural and behavioural design patterns."""

__version__ = "0.1.0"