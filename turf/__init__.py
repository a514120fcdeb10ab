"""Process listing, Ethernet frame inspection helpers and small utilities."""

__version__ = "0.1.0"