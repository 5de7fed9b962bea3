"""To Click Or Not: a clicker life simulation."""

__version__ = "0.1.0"
