"""Parse expressions of x, convert them to postfix form and plot them as text."""

__version__ = "0.1.0"