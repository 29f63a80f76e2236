"""cssbuilder -- CSS selector builder with small object helpers."""

__version__ = "0.1.0"
