from blcli.models.account import Account, Balance
from blcli.models.actions import Action
from blcli.models.common import BLModel, Links, ListOptions, Meta, Page, Pages, Region
from blcli.models.domains import Domain, DomainCreateRequest, DomainRecord, DomainRecordEditRequest
from blcli.models.firewalls import (
    Destinations,
    Firewall,
    FirewallRequest,
    FirewallRulesRequest,
    InboundRule,
    OutboundRule,
    Sources,
)
from blcli.models.floating_ips import FloatingIP, FloatingIPCreateRequest
from blcli.models.load_balancers import (
    ForwardingRule,
    HealthCheck,
    LoadBalancer,
    LoadBalancerRequest,
    StickySessions,
)
from blcli.models.servers import Image, Networks, Server, ServerCreateRequest
from blcli.models.vpcs import VPC, VPCCreateRequest, VPCSetRequest, VPCUpdateRequest

__all__ = [
    "Account",
    "Action",
    "BLModel",
    "Balance",
    "Destinations",
    "Domain",
    "DomainCreateRequest",
    "DomainRecord",
    "DomainRecordEditRequest",
    "Firewall",
    "FirewallRequest",
    "FirewallRulesRequest",
    "FloatingIP",
    "FloatingIPCreateRequest",
    "ForwardingRule",
    "HealthCheck",
    "Image",
    "InboundRule",
    "Links",
    "ListOptions",
    "LoadBalancer",
    "LoadBalancerRequest",
    "Meta",
    "Networks",
    "OutboundRule",
    "Page",
    "Pages",
    "Region",
    "Server",
    "ServerCreateRequest",
    "Sources",
    "StickySessions",
    "VPC",
    "VPCCreateRequest",
    "VPCSetRequest",
    "VPCUpdateRequest",
]
