"""Discord bot that posts TLDRs of recent channel conversation."""

__version__ = "0.1.0"
