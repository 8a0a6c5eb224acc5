"""Fetch, store and turn into map markers natural events from the EONET API."""

__version__ = "0.1.0"
__all__ = ["__version__"]