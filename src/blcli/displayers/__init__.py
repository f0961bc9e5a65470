from blcli.displayers.account import AccountDisplayer, BalanceDisplayer
from blcli.displayers.actions import ActionDisplayer
from blcli.displayers.base import Displayable, ResourceDisplayer
from blcli.displayers.domains import DomainDisplayer, DomainRecordDisplayer
from blcli.displayers.firewalls import FirewallDisplayer
from blcli.displayers.floating_ips import FloatingIPDisplayer
from blcli.displayers.load_balancers import LoadBalancerDisplayer
from blcli.displayers.regions import RegionDisplayer
from blcli.displayers.servers import ServerDisplayer
from blcli.displayers.vpcs import VPCDisplayer

__all__ = [
    "AccountDisplayer",
    "ActionDisplayer",
    "BalanceDisplayer",
    "Displayable",
    "DomainDisplayer",
    "DomainRecordDisplayer",
    "FirewallDisplayer",
    "FloatingIPDisplayer",
    "LoadBalancerDisplayer",
    "RegionDisplayer",
    "ResourceDisplayer",
    "ServerDisplayer",
    "VPCDisplayer",
]
