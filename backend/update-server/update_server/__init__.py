"""Update server for SWUpdate clients."""

__version__ = "0.1.0"
