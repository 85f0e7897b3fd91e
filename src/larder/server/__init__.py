"""ASGI application factory and dependencies for the Larder server."""

from larder.server.app import create_app

__all__ = ["create_app"]
