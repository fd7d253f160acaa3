"""Resource layer with typed interfaces.

Provides the Core API namespaces and the generic resource they are built on.
"""

from .base_resource import BaseResource
from .core_v1 import (
    ClientsResource,
    ContactsResource,
    ContractsResource,
    Core,
    CoreV1,
    HardwareAssetsResource,
    MembersResource,
    OpportunitiesResource,
    SaaSResource,
    TicketsResource,
)

__all__ = [
    "BaseResource",
    "ClientsResource",
    "ContactsResource",
    "ContractsResource",
    "Core",
    "CoreV1",
    "HardwareAssetsResource",
    "MembersResource",
    "OpportunitiesResource",
    "SaaSResource",
    "TicketsResource",
]
