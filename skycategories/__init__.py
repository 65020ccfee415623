"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Sky Categories, a product of Garudex Labs

Sky Categories client - Python SDK for the categories microservice.

Provides a typed HTTP/JSON client for creating and reading categories and
for managing their associations with projects and skills.
"""

from skycategories._version import __version__

__all__ = ["__version__"]
