"""MLB provider backed by the MLB Stats API."""

from homegame.providers.mlb.client import MLBClient
from homegame.providers.mlb.provider import MLBAdapter

__all__ = ["MLBAdapter", "MLBClient"]
