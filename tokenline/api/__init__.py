"""HTTP surface for Tokenline."""

from tokenline.api.app import create_app

__all__ = ["create_app"]
