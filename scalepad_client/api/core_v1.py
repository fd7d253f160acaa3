"""Core API v1 resources.

Each resource binds a collection path of the ScalePad Core API to the
generic operations of BaseResource. Items are returned as plain dicts.
"""

from typing import Any, Dict

from ..services.logger import Logger
from ..utils.http_client import HttpClient
from .base_resource import BaseResource

Client = Dict[str, Any]
Contact = Dict[str, Any]
Contract = Dict[str, Any]
HardwareAsset = Dict[str, Any]
Member = Dict[str, Any]
SaaS = Dict[str, Any]
Ticket = Dict[str, Any]
Opportunity = Dict[str, Any]


class ClientsResource(BaseResource[Client]):
    """Clients resource."""

    def __init__(self, http_client: HttpClient, logger: Logger):
        super().__init__(http_client, logger, "/core/v1/clients", Client)


class ContactsResource(BaseResource[Contact]):
    """Contacts resource."""

    def __init__(self, http_client: HttpClient, logger: Logger):
        super().__init__(http_client, logger, "/core/v1/contacts", Contact)


class ContractsResource(BaseResource[Contract]):
    """Contracts resource."""

    def __init__(self, http_client: HttpClient, logger: Logger):
        super().__init__(http_client, logger, "/core/v1/contracts", Contract)


class HardwareAssetsResource(BaseResource[HardwareAsset]):
    """Hardware assets resource."""

    def __init__(self, http_client: HttpClient, logger: Logger):
        super().__init__(http_client, logger, "/core/v1/assets/hardware", HardwareAsset)


class MembersResource(BaseResource[Member]):
    """Members resource."""

    def __init__(self, http_client: HttpClient, logger: Logger):
        super().__init__(http_client, logger, "/core/v1/members", Member)


class SaaSResource(BaseResource[SaaS]):
    """SaaS resource."""

    def __init__(self, http_client: HttpClient, logger: Logger):
        super().__init__(http_client, logger, "/core/v1/saas", SaaS)


class TicketsResource(BaseResource[Ticket]):
    """Tickets resource."""

    def __init__(self, http_client: HttpClient, logger: Logger):
        super().__init__(http_client, logger, "/core/v1/tickets", Ticket)


class OpportunitiesResource(BaseResource[Opportunity]):
    """Opportunities resource."""

    def __init__(self, http_client: HttpClient, logger: Logger):
        super().__init__(http_client, logger, "/core/v1/opportunities", Opportunity)


class CoreV1:
    """Core API v1 namespace."""

    def __init__(self, http_client: HttpClient, logger: Logger):
        self.clients = ClientsResource(http_client, logger)
        self.contacts = ContactsResource(http_client, logger)
        self.contracts = ContractsResource(http_client, logger)
        self.hardware_assets = HardwareAssetsResource(http_client, logger)
        self.members = MembersResource(http_client, logger)
        self.saas = SaaSResource(http_client, logger)
        self.tickets = TicketsResource(http_client, logger)
        self.opportunities = OpportunitiesResource(http_client, logger)


class Core:
    """Core API namespace."""

    def __init__(self, http_client: HttpClient, logger: Logger):
        self.v1 = CoreV1(http_client, logger)
