"""Extract group member lists from a WhatsApp account and export them."""

__version__ = "0.1.0"
