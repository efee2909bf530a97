"""Sport schedule providers.

Adapters normalize each upstream API into SchedulePayload. Consumers go
through AdapterRegistry (usually via ScheduleService), never a provider
module directly.
"""

from homegame.providers.http import HttpClient, RequestPolicy
from homegame.providers.registry import AdapterRegistry, get_adapter

__all__ = ["AdapterRegistry", "HttpClient", "RequestPolicy", "get_adapter"]
