from __future__ import annotations

import asyncio
import logging
from enum import Enum
from collections.abc import Awaitable, Callable, Coroutine, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Any, TypeVar

import typer
from pydantic import SecretStr

from blcli import __version__
from blcli.client import AsyncBinaryLaneClient
from blcli.config.manager import ProfileManager
from blcli.config.models import ProfileConfig
from blcli.displayers import (
    AccountDisplayer,
    ActionDisplayer,
    BalanceDisplayer,
    DomainDisplayer,
    DomainRecordDisplayer,
    FirewallDisplayer,
    FloatingIPDisplayer,
    LoadBalancerDisplayer,
    RegionDisplayer,
    ServerDisplayer,
    VPCDisplayer,
)
from blcli.displayers.base import Displayable
from blcli.errors import BLCLIError
from blcli.log import configure_logging
from blcli.models import (
    DomainCreateRequest,
    DomainRecordEditRequest,
    FirewallRequest,
    FirewallRulesRequest,
    FloatingIPCreateRequest,
    LoadBalancerRequest,
    ServerCreateRequest,
    VPCCreateRequest,
    VPCSetRequest,
    VPCUpdateRequest,
)
from blcli.parsing import (
    parse_forwarding_rules,
    parse_health_check,
    parse_ids,
    parse_inbound_rules,
    parse_list,
    parse_outbound_rules,
    parse_sticky_sessions,
)
from blcli.patch import build_patch
from blcli.services.actions import filter_actions
from blcli.settings import RuntimeSettings
from blcli.utils.output import OutputFormat, emit

app = typer.Typer(no_args_is_help=True, add_completion=False, help="BinaryLane command line interface")
profiles_app = typer.Typer(no_args_is_help=True, help="Manage local API profiles")
account_app = typer.Typer(no_args_is_help=True, help="Account details")
balance_app = typer.Typer(no_args_is_help=True, help="Account balance")
actions_app = typer.Typer(no_args_is_help=True, help="Action history")
regions_app = typer.Typer(no_args_is_help=True, help="Regions")
domains_app = typer.Typer(no_args_is_help=True, help="Domains")
records_app = typer.Typer(no_args_is_help=True, help="Domain DNS records")
vpcs_app = typer.Typer(no_args_is_help=True, help="Virtual private clouds")
load_balancers_app = typer.Typer(no_args_is_help=True, help="Load balancers")
firewalls_app = typer.Typer(no_args_is_help=True, help="Firewalls")
floating_ips_app = typer.Typer(no_args_is_help=True, help="Floating IPs")
servers_app = typer.Typer(no_args_is_help=True, help="Servers")

app.add_typer(profiles_app, name="profiles")
app.add_typer(account_app, name="account")
app.add_typer(balance_app, name="balance")
app.add_typer(actions_app, name="actions")
app.add_typer(regions_app, name="regions")
app.add_typer(domains_app, name="domains")
domains_app.add_typer(records_app, name="records")
app.add_typer(vpcs_app, name="vpcs")
app.add_typer(load_balancers_app, name="load-balancers")
app.add_typer(firewalls_app, name="firewalls")
app.add_typer(floating_ips_app, name="floating-ips")
app.add_typer(servers_app, name="servers")


class CLIState:
    def __init__(
        self,
        *,
        profile: str | None,
        config_file: Path | None,
        access_token: str | None,
        api_url: str | None,
        output: OutputFormat,
        columns: list[str] | None,
        no_header: bool,
    ) -> None:
        self.profile = profile
        self.config_file = config_file
        self.access_token = access_token
        self.api_url = api_url
        self.output = output
        self.columns = columns
        self.no_header = no_header


class OutputMode(str, Enum):
    text = "text"
    json = "json"
    yaml = "yaml"


T = TypeVar("T")

ForceOption = Annotated[bool, typer.Option("--force", "-f", help="Delete without confirmation")]


@contextmanager
def _handle_errors() -> Iterator[None]:
    try:
        yield
    except BLCLIError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _run(awaitable: Coroutine[Any, Any, T]) -> T:
    with _handle_errors():
        return asyncio.run(awaitable)


def _state(ctx: typer.Context) -> CLIState:
    obj = ctx.find_root().obj
    if not isinstance(obj, CLIState):
        raise typer.BadParameter("CLI context was not initialized")
    return obj


def _make_client(state: CLIState) -> AsyncBinaryLaneClient:
    return AsyncBinaryLaneClient(
        profile=state.profile,
        config_path=state.config_file,
        access_token=state.access_token,
        base_url=state.api_url,
    )


def _call(state: CLIState, operation: Callable[[AsyncBinaryLaneClient], Awaitable[T]]) -> T:
    async def run() -> T:
        async with _make_client(state) as client:
            return await operation(client)

    return _run(run())


def _display(state: CLIState, displayer: Displayable) -> None:
    with _handle_errors():
        emit(displayer, output=state.output, columns=state.columns, no_header=state.no_header)


def _emit(state: CLIState, value: Any) -> None:
    emit(value, output=state.output)


def _confirm(force: bool, what: str) -> None:
    if not force:
        typer.confirm(f"Are you sure you want to delete {what}?", abort=True)


def _build(request_type: Any, **values: Any) -> Any:
    with _handle_errors():
        return build_patch(request_type, **values)


def _parsed(parser: Callable[..., T], *args: Any) -> T:
    with _handle_errors():
        return parser(*args)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bl {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    access_token: Annotated[
        str | None,
        typer.Option("--access-token", "-t", help="API access token (overrides the profile)"),
    ] = None,
    api_url: Annotated[str | None, typer.Option("--api-url", "-u", help="Override the API base URL")] = None,
    profile: Annotated[str | None, typer.Option("--profile", "-p", help="Profile name")] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config-file", "-c", help="Path to profile config file"),
    ] = None,
    output: Annotated[OutputMode, typer.Option("--output", "-o", help="Output format")] = OutputMode.text,
    columns: Annotated[
        str | None,
        typer.Option("--format", help="Comma separated list of columns to display"),
    ] = None,
    no_header: Annotated[bool, typer.Option("--no-header", help="Omit the table header")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log HTTP and pagination details")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    _ = version
    configure_logging(logging.DEBUG if verbose else RuntimeSettings().log_level)
    ctx.obj = CLIState(
        profile=profile,
        config_file=config_file,
        access_token=access_token,
        api_url=api_url,
        output=output.value,
        columns=parse_list(columns),
        no_header=no_header,
    )


# Profiles -----------------------------------------------------------------


@app.command("configure")
def configure(
    ctx: typer.Context,
    access_token: Annotated[
        str,
        typer.Option(prompt="BinaryLane API access token", hide_input=True, help="API access token"),
    ],
    profile: Annotated[str | None, typer.Option(help="Profile name to write")] = None,
    api_url: Annotated[str | None, typer.Option(help="API base URL")] = None,
    timeout: Annotated[float | None, typer.Option(help="Request timeout in seconds")] = None,
    verify_ssl: Annotated[bool | None, typer.Option("--verify-ssl/--no-verify-ssl")] = None,
    per_page: Annotated[int | None, typer.Option(min=1, help="Items requested per page")] = None,
    max_pages: Annotated[int | None, typer.Option(min=1, help="Page limit for list commands")] = None,
    activate: Annotated[bool, typer.Option("--activate/--no-activate")] = True,
) -> None:
    state = _state(ctx)
    manager = ProfileManager(state.config_file)
    supplied = {
        "access_token": SecretStr(access_token),
        "base_url": api_url,
        "request_timeout_seconds": timeout,
        "verify_ssl": verify_ssl,
        "per_page": per_page,
        "max_pages": max_pages,
    }
    model = ProfileConfig(**{key: value for key, value in supplied.items() if value is not None})
    with _handle_errors():
        cfg = manager.upsert_profile(profile or state.profile or "default", model, activate=activate)
    _emit(state, cfg)


@profiles_app.command("list")
def profiles_list(ctx: typer.Context) -> None:
    state = _state(ctx)
    manager = ProfileManager(state.config_file)
    with _handle_errors():
        names = manager.list_profiles()
        active = manager.load().active_profile
    _emit(state, {"active_profile": active, "profiles": names})


@profiles_app.command("show")
def profiles_show(
    ctx: typer.Context,
    name: Annotated[str | None, typer.Argument(help="Profile name")] = None,
) -> None:
    state = _state(ctx)
    manager = ProfileManager(state.config_file)
    with _handle_errors():
        profile = manager.get_profile(name)
    _emit(state, profile)


@profiles_app.command("use")
def profiles_use(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Profile name")],
) -> None:
    state = _state(ctx)
    manager = ProfileManager(state.config_file)
    with _handle_errors():
        cfg = manager.set_active_profile(name)
    _emit(state, cfg)


@profiles_app.command("delete")
def profiles_delete(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Profile name")],
    force: ForceOption = False,
) -> None:
    state = _state(ctx)
    _confirm(force, f"profile '{name}'")
    manager = ProfileManager(state.config_file)
    with _handle_errors():
        cfg = manager.delete_profile(name)
    _emit(state, cfg)


# Account ------------------------------------------------------------------


@account_app.command("get")
def account_get(ctx: typer.Context) -> None:
    state = _state(ctx)
    _display(state, AccountDisplayer(_call(state, lambda client: client.account.get())))


@balance_app.command("get")
def balance_get(ctx: typer.Context) -> None:
    state = _state(ctx)
    _display(state, BalanceDisplayer(_call(state, lambda client: client.balance.get())))


@actions_app.command("list")
def actions_list(
    ctx: typer.Context,
    resource_type: Annotated[str | None, typer.Option(help="Only actions on this resource type")] = None,
    region: Annotated[str | None, typer.Option(help="Only actions in this region")] = None,
    status: Annotated[str | None, typer.Option(help="Only actions with this status")] = None,
    action_type: Annotated[str | None, typer.Option(help="Only actions of this type")] = None,
    after: Annotated[str | None, typer.Option(help="Completed after this ISO 8601 time")] = None,
    before: Annotated[str | None, typer.Option(help="Completed before this ISO 8601 time")] = None,
) -> None:
    state = _state(ctx)
    actions = _call(state, lambda client: client.actions.list())
    with _handle_errors():
        selected = filter_actions(
            actions,
            resource_type=resource_type,
            region=region,
            status=status,
            action_type=action_type,
            after=after,
            before=before,
        )
    _display(state, ActionDisplayer(selected))


@actions_app.command("get")
def actions_get(ctx: typer.Context, action_id: Annotated[int, typer.Argument(help="Action id")]) -> None:
    state = _state(ctx)
    _display(state, ActionDisplayer(_call(state, lambda client: client.actions.get(action_id))))


@regions_app.command("list")
def regions_list(ctx: typer.Context) -> None:
    state = _state(ctx)
    _display(state, RegionDisplayer(_call(state, lambda client: client.regions.list())))


# Domains ------------------------------------------------------------------


@domains_app.command("list")
def domains_list(ctx: typer.Context) -> None:
    state = _state(ctx)
    _display(state, DomainDisplayer(_call(state, lambda client: client.domains.list())))


@domains_app.command("get")
def domains_get(ctx: typer.Context, name: Annotated[str, typer.Argument(help="Domain name")]) -> None:
    state = _state(ctx)
    _display(state, DomainDisplayer(_call(state, lambda client: client.domains.get(name))))


@domains_app.command("create")
def domains_create(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Domain name")],
    ip_address: Annotated[str | None, typer.Option(help="Create an A record for this address")] = None,
) -> None:
    state = _state(ctx)
    request = _build(DomainCreateRequest, name=name, ip_address=ip_address)
    _display(state, DomainDisplayer(_call(state, lambda client: client.domains.create(request))))


@domains_app.command("delete")
def domains_delete(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Domain name")],
    force: ForceOption = False,
) -> None:
    state = _state(ctx)
    _confirm(force, f"domain '{name}'")
    _call(state, lambda client: client.domains.delete(name))


def _record_request(
    record_type: str | None,
    record_name: str | None,
    record_data: str | None,
    record_priority: int | None,
    record_port: int | None,
    record_ttl: int | None,
    record_weight: int | None,
    record_flags: int | None,
    record_tag: str | None,
) -> DomainRecordEditRequest:
    return _build(
        DomainRecordEditRequest,
        type=record_type,
        name=record_name,
        data=record_data,
        priority=record_priority,
        port=record_port,
        ttl=record_ttl,
        weight=record_weight,
        flags=record_flags,
        tag=record_tag,
    )


RecordType = Annotated[str | None, typer.Option(help="Record type: A, AAAA, CNAME, MX, TXT, SRV, NS, CAA")]
RecordName = Annotated[str | None, typer.Option(help="Record name")]
RecordData = Annotated[str | None, typer.Option(help="Record data")]
RecordPriority = Annotated[int | None, typer.Option(help="Priority for MX and SRV records")]
RecordPort = Annotated[int | None, typer.Option(help="Port for SRV records")]
RecordTTL = Annotated[int | None, typer.Option(help="Time to live in seconds")]
RecordWeight = Annotated[int | None, typer.Option(help="Weight for SRV records")]
RecordFlags = Annotated[int | None, typer.Option(help="Flags for CAA records")]
RecordTag = Annotated[str | None, typer.Option(help="Tag for CAA records")]


@records_app.command("list")
def records_list(ctx: typer.Context, domain: Annotated[str, typer.Argument(help="Domain name")]) -> None:
    state = _state(ctx)
    _display(state, DomainRecordDisplayer(_call(state, lambda client: client.domains.records(domain))))


@records_app.command("get")
def records_get(
    ctx: typer.Context,
    domain: Annotated[str, typer.Argument(help="Domain name")],
    record_id: Annotated[int, typer.Argument(help="Record id")],
) -> None:
    state = _state(ctx)
    _display(state, DomainRecordDisplayer(_call(state, lambda client: client.domains.record(domain, record_id))))


@records_app.command("create")
def records_create(
    ctx: typer.Context,
    domain: Annotated[str, typer.Argument(help="Domain name")],
    record_type: RecordType = None,
    record_name: RecordName = None,
    record_data: RecordData = None,
    record_priority: RecordPriority = None,
    record_port: RecordPort = None,
    record_ttl: RecordTTL = None,
    record_weight: RecordWeight = None,
    record_flags: RecordFlags = None,
    record_tag: RecordTag = None,
) -> None:
    state = _state(ctx)
    request = _record_request(
        record_type,
        record_name,
        record_data,
        record_priority,
        record_port,
        record_ttl,
        record_weight,
        record_flags,
        record_tag,
    )
    record = _call(state, lambda client: client.domains.create_record(domain, request))
    _display(state, DomainRecordDisplayer(record))


@records_app.command("update")
def records_update(
    ctx: typer.Context,
    domain: Annotated[str, typer.Argument(help="Domain name")],
    record_id: Annotated[int, typer.Argument(help="Record id")],
    record_type: RecordType = None,
    record_name: RecordName = None,
    record_data: RecordData = None,
    record_priority: RecordPriority = None,
    record_port: RecordPort = None,
    record_ttl: RecordTTL = None,
    record_weight: RecordWeight = None,
    record_flags: RecordFlags = None,
    record_tag: RecordTag = None,
) -> None:
    state = _state(ctx)
    request = _record_request(
        record_type,
        record_name,
        record_data,
        record_priority,
        record_port,
        record_ttl,
        record_weight,
        record_flags,
        record_tag,
    )
    record = _call(state, lambda client: client.domains.edit_record(domain, record_id, request))
    _display(state, DomainRecordDisplayer(record))


@records_app.command("delete")
def records_delete(
    ctx: typer.Context,
    domain: Annotated[str, typer.Argument(help="Domain name")],
    record_id: Annotated[int, typer.Argument(help="Record id")],
    force: ForceOption = False,
) -> None:
    state = _state(ctx)
    _confirm(force, f"record {record_id} of '{domain}'")
    _call(state, lambda client: client.domains.delete_record(domain, record_id))


# VPCs ---------------------------------------------------------------------


@vpcs_app.command("list")
def vpcs_list(ctx: typer.Context) -> None:
    state = _state(ctx)
    _display(state, VPCDisplayer(_call(state, lambda client: client.vpcs.list())))


@vpcs_app.command("get")
def vpcs_get(ctx: typer.Context, vpc_id: Annotated[int, typer.Argument(help="VPC id")]) -> None:
    state = _state(ctx)
    _display(state, VPCDisplayer(_call(state, lambda client: client.vpcs.get(vpc_id))))


@vpcs_app.command("create")
def vpcs_create(
    ctx: typer.Context,
    name: Annotated[str, typer.Option(help="VPC name")],
    region: Annotated[str, typer.Option(help="Region slug")],
    description: Annotated[str | None, typer.Option(help="VPC description")] = None,
    ip_range: Annotated[str | None, typer.Option(help="Private IP range in CIDR notation")] = None,
) -> None:
    state = _state(ctx)
    request = _build(VPCCreateRequest, name=name, region=region, description=description, ip_range=ip_range)
    _display(state, VPCDisplayer(_call(state, lambda client: client.vpcs.create(request))))


@vpcs_app.command("update")
def vpcs_update(
    ctx: typer.Context,
    vpc_id: Annotated[int, typer.Argument(help="VPC id")],
    name: Annotated[str | None, typer.Option(help="VPC name")] = None,
    description: Annotated[str | None, typer.Option(help="VPC description")] = None,
    default: Annotated[bool | None, typer.Option("--default/--no-default", help="Region default VPC")] = None,
) -> None:
    state = _state(ctx)
    request = _build(VPCUpdateRequest, name=name, description=description, default=default)
    _display(state, VPCDisplayer(_call(state, lambda client: client.vpcs.update(vpc_id, request))))


@vpcs_app.command("set")
def vpcs_set(
    ctx: typer.Context,
    vpc_id: Annotated[int, typer.Argument(help="VPC id")],
    name: Annotated[str | None, typer.Option(help="VPC name")] = None,
    description: Annotated[str | None, typer.Option(help="VPC description")] = None,
    default: Annotated[bool | None, typer.Option("--default/--no-default", help="Region default VPC")] = None,
) -> None:
    state = _state(ctx)
    request = _build(VPCSetRequest, name=name, description=description, default=default)
    _display(state, VPCDisplayer(_call(state, lambda client: client.vpcs.set(vpc_id, request))))


@vpcs_app.command("delete")
def vpcs_delete(
    ctx: typer.Context,
    vpc_id: Annotated[int, typer.Argument(help="VPC id")],
    force: ForceOption = False,
) -> None:
    state = _state(ctx)
    _confirm(force, f"VPC {vpc_id}")
    _call(state, lambda client: client.vpcs.delete(vpc_id))


# Load balancers -----------------------------------------------------------


def _load_balancer_request(
    *,
    name: str | None,
    region: str | None,
    size: str | None,
    algorithm: str | None,
    forwarding_rules: str | None,
    health_check: str | None,
    sticky_sessions: str | None,
    server_ids: str | None,
    tag: str | None,
    redirect_http_to_https: bool | None,
    enable_proxy_protocol: bool | None,
    enable_backend_keepalive: bool | None,
    vpc_id: int | None,
) -> LoadBalancerRequest:
    return _build(
        LoadBalancerRequest,
        name=name,
        region=region,
        size=size,
        algorithm=algorithm,
        forwarding_rules=_parsed(parse_forwarding_rules, forwarding_rules) if forwarding_rules else None,
        health_check=_parsed(parse_health_check, health_check) if health_check else None,
        sticky_sessions=_parsed(parse_sticky_sessions, sticky_sessions) if sticky_sessions else None,
        server_ids=_parsed(parse_ids, "server-ids", server_ids),
        tag=tag,
        redirect_http_to_https=redirect_http_to_https,
        enable_proxy_protocol=enable_proxy_protocol,
        enable_backend_keepalive=enable_backend_keepalive,
        vpc_id=vpc_id,
    )


LBName = Annotated[str | None, typer.Option(help="Load balancer name")]
LBRegion = Annotated[str | None, typer.Option(help="Region slug")]
LBSize = Annotated[str | None, typer.Option(help="Load balancer size")]
LBAlgorithm = Annotated[str | None, typer.Option(help="round_robin or least_connections")]
LBForwardingRules = Annotated[
    str | None,
    typer.Option(help="entry_protocol:http,entry_port:80,target_protocol:http,target_port:80 (space separated)"),
]
LBHealthCheck = Annotated[str | None, typer.Option(help="protocol:http,port:80,path:/,check_interval_seconds:10,...")]
LBStickySessions = Annotated[str | None, typer.Option(help="type:cookies,cookie_name:lb,cookie_ttl_seconds:300")]
LBServerIDs = Annotated[str | None, typer.Option(help="Comma separated server ids")]
LBTag = Annotated[str | None, typer.Option(help="Balance across servers with this tag")]
LBRedirect = Annotated[bool | None, typer.Option("--redirect-http-to-https/--no-redirect-http-to-https")]
LBProxyProtocol = Annotated[bool | None, typer.Option("--enable-proxy-protocol/--disable-proxy-protocol")]
LBKeepalive = Annotated[bool | None, typer.Option("--enable-backend-keepalive/--disable-backend-keepalive")]
LBVPC = Annotated[int | None, typer.Option(help="VPC id")]


@load_balancers_app.command("list")
def load_balancers_list(ctx: typer.Context) -> None:
    state = _state(ctx)
    _display(state, LoadBalancerDisplayer(_call(state, lambda client: client.load_balancers.list())))


@load_balancers_app.command("get")
def load_balancers_get(ctx: typer.Context, lb_id: Annotated[int, typer.Argument(help="Load balancer id")]) -> None:
    state = _state(ctx)
    _display(state, LoadBalancerDisplayer(_call(state, lambda client: client.load_balancers.get(lb_id))))


@load_balancers_app.command("create")
def load_balancers_create(
    ctx: typer.Context,
    name: LBName = None,
    region: LBRegion = None,
    size: LBSize = None,
    algorithm: LBAlgorithm = None,
    forwarding_rules: LBForwardingRules = None,
    health_check: LBHealthCheck = None,
    sticky_sessions: LBStickySessions = None,
    server_ids: LBServerIDs = None,
    tag: LBTag = None,
    redirect_http_to_https: LBRedirect = None,
    enable_proxy_protocol: LBProxyProtocol = None,
    enable_backend_keepalive: LBKeepalive = None,
    vpc_id: LBVPC = None,
) -> None:
    state = _state(ctx)
    request = _load_balancer_request(
        name=name,
        region=region,
        size=size,
        algorithm=algorithm,
        forwarding_rules=forwarding_rules,
        health_check=health_check,
        sticky_sessions=sticky_sessions,
        server_ids=server_ids,
        tag=tag,
        redirect_http_to_https=redirect_http_to_https,
        enable_proxy_protocol=enable_proxy_protocol,
        enable_backend_keepalive=enable_backend_keepalive,
        vpc_id=vpc_id,
    )
    _display(state, LoadBalancerDisplayer(_call(state, lambda client: client.load_balancers.create(request))))


@load_balancers_app.command("update")
def load_balancers_update(
    ctx: typer.Context,
    lb_id: Annotated[int, typer.Argument(help="Load balancer id")],
    name: LBName = None,
    region: LBRegion = None,
    size: LBSize = None,
    algorithm: LBAlgorithm = None,
    forwarding_rules: LBForwardingRules = None,
    health_check: LBHealthCheck = None,
    sticky_sessions: LBStickySessions = None,
    server_ids: LBServerIDs = None,
    tag: LBTag = None,
    redirect_http_to_https: LBRedirect = None,
    enable_proxy_protocol: LBProxyProtocol = None,
    enable_backend_keepalive: LBKeepalive = None,
    vpc_id: LBVPC = None,
) -> None:
    state = _state(ctx)
    request = _load_balancer_request(
        name=name,
        region=region,
        size=size,
        algorithm=algorithm,
        forwarding_rules=forwarding_rules,
        health_check=health_check,
        sticky_sessions=sticky_sessions,
        server_ids=server_ids,
        tag=tag,
        redirect_http_to_https=redirect_http_to_https,
        enable_proxy_protocol=enable_proxy_protocol,
        enable_backend_keepalive=enable_backend_keepalive,
        vpc_id=vpc_id,
    )
    lb = _call(state, lambda client: client.load_balancers.update(lb_id, request))
    _display(state, LoadBalancerDisplayer(lb))


@load_balancers_app.command("delete")
def load_balancers_delete(
    ctx: typer.Context,
    lb_id: Annotated[int, typer.Argument(help="Load balancer id")],
    force: ForceOption = False,
) -> None:
    state = _state(ctx)
    _confirm(force, f"load balancer {lb_id}")
    _call(state, lambda client: client.load_balancers.delete(lb_id))


@load_balancers_app.command("add-servers")
def load_balancers_add_servers(
    ctx: typer.Context,
    lb_id: Annotated[int, typer.Argument(help="Load balancer id")],
    server_ids: Annotated[str, typer.Option(help="Comma separated server ids")],
) -> None:
    state = _state(ctx)
    ids = _parsed(parse_ids, "server-ids", server_ids) or []
    _call(state, lambda client: client.load_balancers.add_servers(lb_id, *ids))


@load_balancers_app.command("remove-servers")
def load_balancers_remove_servers(
    ctx: typer.Context,
    lb_id: Annotated[int, typer.Argument(help="Load balancer id")],
    server_ids: Annotated[str, typer.Option(help="Comma separated server ids")],
) -> None:
    state = _state(ctx)
    ids = _parsed(parse_ids, "server-ids", server_ids) or []
    _call(state, lambda client: client.load_balancers.remove_servers(lb_id, *ids))


@load_balancers_app.command("add-forwarding-rules")
def load_balancers_add_forwarding_rules(
    ctx: typer.Context,
    lb_id: Annotated[int, typer.Argument(help="Load balancer id")],
    forwarding_rules: Annotated[str, typer.Option(help="Forwarding rules (space separated)")],
) -> None:
    state = _state(ctx)
    rules = _parsed(parse_forwarding_rules, forwarding_rules)
    _call(state, lambda client: client.load_balancers.add_forwarding_rules(lb_id, *rules))


@load_balancers_app.command("remove-forwarding-rules")
def load_balancers_remove_forwarding_rules(
    ctx: typer.Context,
    lb_id: Annotated[int, typer.Argument(help="Load balancer id")],
    forwarding_rules: Annotated[str, typer.Option(help="Forwarding rules (space separated)")],
) -> None:
    state = _state(ctx)
    rules = _parsed(parse_forwarding_rules, forwarding_rules)
    _call(state, lambda client: client.load_balancers.remove_forwarding_rules(lb_id, *rules))


# Firewalls ----------------------------------------------------------------

InboundRules = Annotated[
    str | None,
    typer.Option(help="protocol:tcp,ports:22,address:0.0.0.0/0 (space separated)"),
]
OutboundRules = Annotated[
    str | None,
    typer.Option(help="protocol:tcp,ports:all,address:0.0.0.0/0 (space separated)"),
]


def _firewall_request(
    *,
    name: str | None,
    inbound_rules: str | None,
    outbound_rules: str | None,
    server_ids: str | None,
    tag_names: str | None,
) -> FirewallRequest:
    return _build(
        FirewallRequest,
        name=name,
        inbound_rules=_parsed(parse_inbound_rules, inbound_rules) if inbound_rules else None,
        outbound_rules=_parsed(parse_outbound_rules, outbound_rules) if outbound_rules else None,
        server_ids=_parsed(parse_ids, "server-ids", server_ids),
        tags=parse_list(tag_names),
    )


def _rules_request(inbound_rules: str | None, outbound_rules: str | None) -> FirewallRulesRequest:
    if not inbound_rules and not outbound_rules:
        raise typer.BadParameter("pass --inbound-rules or --outbound-rules")
    return _build(
        FirewallRulesRequest,
        inbound_rules=_parsed(parse_inbound_rules, inbound_rules) if inbound_rules else None,
        outbound_rules=_parsed(parse_outbound_rules, outbound_rules) if outbound_rules else None,
    )


@firewalls_app.command("list")
def firewalls_list(ctx: typer.Context) -> None:
    state = _state(ctx)
    _display(state, FirewallDisplayer(_call(state, lambda client: client.firewalls.list())))


@firewalls_app.command("list-by-server")
def firewalls_list_by_server(
    ctx: typer.Context,
    server_id: Annotated[int, typer.Argument(help="Server id")],
) -> None:
    state = _state(ctx)
    _display(state, FirewallDisplayer(_call(state, lambda client: client.firewalls.list_by_server(server_id))))


@firewalls_app.command("get")
def firewalls_get(ctx: typer.Context, firewall_id: Annotated[str, typer.Argument(help="Firewall id")]) -> None:
    state = _state(ctx)
    _display(state, FirewallDisplayer(_call(state, lambda client: client.firewalls.get(firewall_id))))


@firewalls_app.command("create")
def firewalls_create(
    ctx: typer.Context,
    name: Annotated[str, typer.Option(help="Firewall name")],
    inbound_rules: InboundRules = None,
    outbound_rules: OutboundRules = None,
    server_ids: Annotated[str | None, typer.Option(help="Comma separated server ids")] = None,
    tag_names: Annotated[str | None, typer.Option(help="Comma separated tags")] = None,
) -> None:
    state = _state(ctx)
    request = _firewall_request(
        name=name,
        inbound_rules=inbound_rules,
        outbound_rules=outbound_rules,
        server_ids=server_ids,
        tag_names=tag_names,
    )
    _display(state, FirewallDisplayer(_call(state, lambda client: client.firewalls.create(request))))


@firewalls_app.command("update")
def firewalls_update(
    ctx: typer.Context,
    firewall_id: Annotated[str, typer.Argument(help="Firewall id")],
    name: Annotated[str | None, typer.Option(help="Firewall name")] = None,
    inbound_rules: InboundRules = None,
    outbound_rules: OutboundRules = None,
    server_ids: Annotated[str | None, typer.Option(help="Comma separated server ids")] = None,
    tag_names: Annotated[str | None, typer.Option(help="Comma separated tags")] = None,
) -> None:
    state = _state(ctx)
    request = _firewall_request(
        name=name,
        inbound_rules=inbound_rules,
        outbound_rules=outbound_rules,
        server_ids=server_ids,
        tag_names=tag_names,
    )
    firewall = _call(state, lambda client: client.firewalls.update(firewall_id, request))
    _display(state, FirewallDisplayer(firewall))


@firewalls_app.command("delete")
def firewalls_delete(
    ctx: typer.Context,
    firewall_id: Annotated[str, typer.Argument(help="Firewall id")],
    force: ForceOption = False,
) -> None:
    state = _state(ctx)
    _confirm(force, f"firewall {firewall_id}")
    _call(state, lambda client: client.firewalls.delete(firewall_id))


@firewalls_app.command("add-servers")
def firewalls_add_servers(
    ctx: typer.Context,
    firewall_id: Annotated[str, typer.Argument(help="Firewall id")],
    server_ids: Annotated[str, typer.Option(help="Comma separated server ids")],
) -> None:
    state = _state(ctx)
    ids = _parsed(parse_ids, "server-ids", server_ids) or []
    _call(state, lambda client: client.firewalls.add_servers(firewall_id, *ids))


@firewalls_app.command("remove-servers")
def firewalls_remove_servers(
    ctx: typer.Context,
    firewall_id: Annotated[str, typer.Argument(help="Firewall id")],
    server_ids: Annotated[str, typer.Option(help="Comma separated server ids")],
) -> None:
    state = _state(ctx)
    ids = _parsed(parse_ids, "server-ids", server_ids) or []
    _call(state, lambda client: client.firewalls.remove_servers(firewall_id, *ids))


@firewalls_app.command("add-tags")
def firewalls_add_tags(
    ctx: typer.Context,
    firewall_id: Annotated[str, typer.Argument(help="Firewall id")],
    tag_names: Annotated[str, typer.Option(help="Comma separated tags")],
) -> None:
    state = _state(ctx)
    tags = parse_list(tag_names) or []
    _call(state, lambda client: client.firewalls.add_tags(firewall_id, *tags))


@firewalls_app.command("remove-tags")
def firewalls_remove_tags(
    ctx: typer.Context,
    firewall_id: Annotated[str, typer.Argument(help="Firewall id")],
    tag_names: Annotated[str, typer.Option(help="Comma separated tags")],
) -> None:
    state = _state(ctx)
    tags = parse_list(tag_names) or []
    _call(state, lambda client: client.firewalls.remove_tags(firewall_id, *tags))


@firewalls_app.command("add-rules")
def firewalls_add_rules(
    ctx: typer.Context,
    firewall_id: Annotated[str, typer.Argument(help="Firewall id")],
    inbound_rules: InboundRules = None,
    outbound_rules: OutboundRules = None,
) -> None:
    state = _state(ctx)
    request = _rules_request(inbound_rules, outbound_rules)
    _call(state, lambda client: client.firewalls.add_rules(firewall_id, request))


@firewalls_app.command("remove-rules")
def firewalls_remove_rules(
    ctx: typer.Context,
    firewall_id: Annotated[str, typer.Argument(help="Firewall id")],
    inbound_rules: InboundRules = None,
    outbound_rules: OutboundRules = None,
) -> None:
    state = _state(ctx)
    request = _rules_request(inbound_rules, outbound_rules)
    _call(state, lambda client: client.firewalls.remove_rules(firewall_id, request))


# Floating IPs -------------------------------------------------------------


@floating_ips_app.command("list")
def floating_ips_list(ctx: typer.Context) -> None:
    state = _state(ctx)
    _display(state, FloatingIPDisplayer(_call(state, lambda client: client.floating_ips.list())))


@floating_ips_app.command("get")
def floating_ips_get(ctx: typer.Context, ip: Annotated[str, typer.Argument(help="Floating IP address")]) -> None:
    state = _state(ctx)
    _display(state, FloatingIPDisplayer(_call(state, lambda client: client.floating_ips.get(ip))))


@floating_ips_app.command("create")
def floating_ips_create(
    ctx: typer.Context,
    region: Annotated[str | None, typer.Option(help="Reserve the address in this region")] = None,
    server_id: Annotated[int | None, typer.Option(help="Assign the address to this server")] = None,
) -> None:
    state = _state(ctx)
    request = _build(FloatingIPCreateRequest, region=region, server_id=server_id)
    _display(state, FloatingIPDisplayer(_call(state, lambda client: client.floating_ips.create(request))))


@floating_ips_app.command("delete")
def floating_ips_delete(
    ctx: typer.Context,
    ip: Annotated[str, typer.Argument(help="Floating IP address")],
    force: ForceOption = False,
) -> None:
    state = _state(ctx)
    _confirm(force, f"floating IP {ip}")
    _call(state, lambda client: client.floating_ips.delete(ip))


# Servers ------------------------------------------------------------------


@servers_app.command("list")
def servers_list(
    ctx: typer.Context,
    tag_name: Annotated[str | None, typer.Option(help="Only servers with this tag")] = None,
) -> None:
    state = _state(ctx)
    if tag_name is not None:
        servers = _call(state, lambda client: client.servers.list_by_tag(tag_name))
    else:
        servers = _call(state, lambda client: client.servers.list())
    _display(state, ServerDisplayer(servers))


@servers_app.command("get")
def servers_get(ctx: typer.Context, server_id: Annotated[int, typer.Argument(help="Server id")]) -> None:
    state = _state(ctx)
    _display(state, ServerDisplayer(_call(state, lambda client: client.servers.get(server_id))))


@servers_app.command("create")
def servers_create(
    ctx: typer.Context,
    name: Annotated[str, typer.Option(help="Server hostname")],
    region: Annotated[str, typer.Option(help="Region slug")],
    size: Annotated[str, typer.Option(help="Size slug")],
    image: Annotated[str, typer.Option(help="Image slug or id")],
    ssh_keys: Annotated[str | None, typer.Option(help="Comma separated SSH key ids or fingerprints")] = None,
    enable_backups: Annotated[bool | None, typer.Option("--enable-backups/--disable-backups")] = None,
    enable_ipv6: Annotated[bool | None, typer.Option("--enable-ipv6/--disable-ipv6")] = None,
    user_data: Annotated[str | None, typer.Option(help="Cloud-init user data")] = None,
    user_data_file: Annotated[
        Path | None,
        typer.Option(exists=True, dir_okay=False, readable=True, help="Read user data from a file"),
    ] = None,
    tag_names: Annotated[str | None, typer.Option(help="Comma separated tags")] = None,
    vpc_id: Annotated[int | None, typer.Option(help="VPC id")] = None,
) -> None:
    state = _state(ctx)
    if user_data is not None and user_data_file is not None:
        raise typer.BadParameter("use either --user-data or --user-data-file")
    if user_data_file is not None:
        user_data = user_data_file.read_text(encoding="utf-8")
    request = _build(
        ServerCreateRequest,
        name=name,
        region=region,
        size=size,
        image=image,
        ssh_keys=parse_list(ssh_keys),
        backups=enable_backups,
        ipv6=enable_ipv6,
        user_data=user_data,
        tags=parse_list(tag_names),
        vpc_id=vpc_id,
    )
    _display(state, ServerDisplayer(_call(state, lambda client: client.servers.create(request))))


@servers_app.command("delete")
def servers_delete(
    ctx: typer.Context,
    server_ids: Annotated[list[int] | None, typer.Argument(help="Server ids")] = None,
    tag_name: Annotated[str | None, typer.Option(help="Delete every server with this tag")] = None,
    force: ForceOption = False,
) -> None:
    state = _state(ctx)
    if tag_name is not None and server_ids:
        raise typer.BadParameter("pass server ids or --tag-name, not both")
    if tag_name is not None:
        _confirm(force, f"every server tagged '{tag_name}'")
        _call(state, lambda client: client.servers.delete_by_tag(tag_name))
        return
    if not server_ids:
        raise typer.BadParameter("pass at least one server id or --tag-name")

    _confirm(force, f"{len(server_ids)} server(s)")

    async def delete_all(client: AsyncBinaryLaneClient) -> None:
        for server_id in server_ids:
            await client.servers.delete(server_id)

    _call(state, delete_all)


@servers_app.command("actions")
def servers_actions(ctx: typer.Context, server_id: Annotated[int, typer.Argument(help="Server id")]) -> None:
    state = _state(ctx)
    _display(state, ActionDisplayer(_call(state, lambda client: client.servers.actions(server_id))))


def run() -> None:
    try:
        app()
    except BLCLIError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    run()
