"""JSON API for the microsite."""

from homegame.api.app import create_app

__all__ = ["create_app"]
