from blcli.services.account import AccountService, BalanceService
from blcli.services.actions import ActionsService
from blcli.services.domains import DomainsService
from blcli.services.firewalls import FirewallsService
from blcli.services.floating_ips import FloatingIPsService
from blcli.services.load_balancers import LoadBalancersService
from blcli.services.regions import RegionsService
from blcli.services.servers import ServersService
from blcli.services.vpcs import VPCsService

__all__ = [
    "AccountService",
    "ActionsService",
    "BalanceService",
    "DomainsService",
    "FirewallsService",
    "FloatingIPsService",
    "LoadBalancersService",
    "RegionsService",
    "ServersService",
    "VPCsService",
]
