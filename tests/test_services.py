from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
import pytest

from blcli.client import AsyncBinaryLaneClient
from blcli.errors import InvalidArgumentError, RequestError
from blcli.models import (
    Action,
    DomainCreateRequest,
    DomainRecordEditRequest,
    FirewallRulesRequest,
    FloatingIPCreateRequest,
    ForwardingRule,
    LoadBalancerRequest,
    ServerCreateRequest,
    VPCCreateRequest,
    VPCSetRequest,
    VPCUpdateRequest,
)
from blcli.patch import build_patch
from blcli.services import (
    AccountService,
    ActionsService,
    BalanceService,
    DomainsService,
    FirewallsService,
    FloatingIPsService,
    LoadBalancersService,
    RegionsService,
    ServersService,
    VPCsService,
)
from blcli.services.actions import filter_actions

BASE_URL = "https://api.binarylane.com.au"


class _RecordingClient:
    """Stands in for the API client and records every request attempt."""

    per_page = 200
    max_pages = 10

    def __init__(self, responses: list[dict[str, Any]] | None = None) -> None:
        self.calls: list[tuple[str, str, dict[str, Any], Any]] = []
        self._responses = list(responses or [])

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: Any = None,
        json_data: Any = None,
    ) -> dict[str, Any]:
        self.calls.append((method, path, dict(params or {}), json_data))
        return self._responses.pop(0) if self._responses else {}


Call = Callable[[_RecordingClient], Awaitable[Any]]

INVALID_CALLS: list[tuple[str, Call]] = [
    ("actions.get zero", lambda c: ActionsService(c).get(0)),
    ("domains.get empty", lambda c: DomainsService(c).get("")),
    ("domains.create none", lambda c: DomainsService(c).create(None)),
    ("domains.delete empty", lambda c: DomainsService(c).delete("")),
    ("domains.records empty", lambda c: DomainsService(c).records("")),
    ("domains.record zero", lambda c: DomainsService(c).record("example.com", 0)),
    ("domains.record empty", lambda c: DomainsService(c).record("", 1)),
    ("domains.create_record none", lambda c: DomainsService(c).create_record("example.com", None)),
    (
        "domains.edit_record zero",
        lambda c: DomainsService(c).edit_record("example.com", 0, DomainRecordEditRequest()),
    ),
    ("domains.delete_record negative", lambda c: DomainsService(c).delete_record("example.com", -1)),
    ("vpcs.get zero", lambda c: VPCsService(c).get(0)),
    ("vpcs.create none", lambda c: VPCsService(c).create(None)),
    ("vpcs.update zero", lambda c: VPCsService(c).update(0, VPCUpdateRequest(name="x"))),
    ("vpcs.update none", lambda c: VPCsService(c).update(5, None)),
    ("vpcs.set zero", lambda c: VPCsService(c).set(0, VPCSetRequest())),
    ("vpcs.delete zero", lambda c: VPCsService(c).delete(0)),
    ("load_balancers.get zero", lambda c: LoadBalancersService(c).get(0)),
    ("load_balancers.update none", lambda c: LoadBalancersService(c).update(3, None)),
    ("load_balancers.delete zero", lambda c: LoadBalancersService(c).delete(0)),
    ("load_balancers.add_servers none given", lambda c: LoadBalancersService(c).add_servers(3)),
    ("load_balancers.add_servers zero id", lambda c: LoadBalancersService(c).add_servers(3, 0)),
    ("load_balancers.remove_forwarding_rules none given", lambda c: LoadBalancersService(c).remove_forwarding_rules(3)),
    ("firewalls.get empty", lambda c: FirewallsService(c).get("")),
    ("firewalls.list_by_server zero", lambda c: FirewallsService(c).list_by_server(0)),
    ("firewalls.delete empty", lambda c: FirewallsService(c).delete("")),
    ("firewalls.add_tags none given", lambda c: FirewallsService(c).add_tags("fw-1")),
    ("firewalls.remove_servers empty id", lambda c: FirewallsService(c).remove_servers("", 1)),
    ("firewalls.add_rules none", lambda c: FirewallsService(c).add_rules("fw-1", None)),
    ("floating_ips.get empty", lambda c: FloatingIPsService(c).get("")),
    ("floating_ips.create without target", lambda c: FloatingIPsService(c).create(FloatingIPCreateRequest())),
    ("floating_ips.delete empty", lambda c: FloatingIPsService(c).delete("")),
    ("servers.get zero", lambda c: ServersService(c).get(0)),
    ("servers.delete zero", lambda c: ServersService(c).delete(0)),
    ("servers.list_by_tag empty", lambda c: ServersService(c).list_by_tag("")),
    ("servers.delete_by_tag empty", lambda c: ServersService(c).delete_by_tag("")),
    ("servers.actions zero", lambda c: ServersService(c).actions(0)),
    ("servers.create none", lambda c: ServersService(c).create(None)),
]


@pytest.mark.asyncio
@pytest.mark.parametrize(("label", "call"), INVALID_CALLS, ids=[label for label, _ in INVALID_CALLS])
async def test_invalid_arguments_never_reach_the_network(label: str, call: Call) -> None:
    client = _RecordingClient()

    with pytest.raises(InvalidArgumentError):
        await call(client)

    assert client.calls == []


@pytest.mark.asyncio
async def test_invalid_argument_message_names_argument() -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        await VPCsService(_RecordingClient()).get(0)

    assert excinfo.value.argument == "id"
    assert str(excinfo.value) == "id is invalid because cannot be less than 1"


@pytest.mark.asyncio
async def test_get_unwraps_root_key() -> None:
    client = _RecordingClient([{"vpc": {"id": 7, "name": "internal", "ip_range": "10.240.0.0/16"}}])

    vpc = await VPCsService(client).get(7)

    assert vpc.id == 7
    assert vpc.urn == "bl:vpc:7"
    assert client.calls == [("GET", "/v2/vpcs/7", {}, None)]


@pytest.mark.asyncio
async def test_vpc_set_sends_patch_with_only_supplied_fields() -> None:
    client = _RecordingClient([{"vpc": {"id": 5, "name": "renamed"}}])

    await VPCsService(client).set(5, build_patch(VPCSetRequest, name="renamed"))

    assert client.calls == [("PATCH", "/v2/vpcs/5", {}, {"name": "renamed"})]


@pytest.mark.asyncio
async def test_domain_records_use_nested_paths() -> None:
    client = _RecordingClient(
        [
            {"domain_record": {"id": 11, "type": "SRV", "port": 0}},
            {},
        ]
    )
    service = DomainsService(client)

    record = await service.edit_record("example.com", 11, build_patch(DomainRecordEditRequest, port=0))
    await service.delete_record("example.com", 11)

    assert record.port == 0
    assert client.calls[0][:2] == ("PUT", "/v2/domains/example.com/records/11")
    assert client.calls[0][3] == {"port": 0, "priority": 0, "weight": 0, "flags": 0}
    assert client.calls[1][:2] == ("DELETE", "/v2/domains/example.com/records/11")


@pytest.mark.asyncio
async def test_domain_create_posts_request() -> None:
    client = _RecordingClient([{"domain": {"name": "example.com"}}])

    domain = await DomainsService(client).create(DomainCreateRequest(name="example.com", ip_address="192.0.2.1"))

    assert domain.name == "example.com"
    assert client.calls == [("POST", "/v2/domains", {}, {"name": "example.com", "ip_address": "192.0.2.1"})]


@pytest.mark.asyncio
async def test_load_balancer_membership_calls() -> None:
    client = _RecordingClient()
    service = LoadBalancersService(client)
    rule = ForwardingRule(entry_protocol="http", entry_port=80, target_protocol="http", target_port=8080)

    await service.add_servers(3, 10, 11)
    await service.remove_forwarding_rules(3, rule)

    assert client.calls[0] == ("POST", "/v2/load_balancers/3/servers", {}, {"server_ids": [10, 11]})
    method, path, _, body = client.calls[1]
    assert (method, path) == ("DELETE", "/v2/load_balancers/3/forwarding_rules")
    assert body["forwarding_rules"][0]["target_port"] == 8080
    assert body["forwarding_rules"][0]["tls_passthrough"] is False


@pytest.mark.asyncio
async def test_load_balancer_create_sends_only_supplied_fields() -> None:
    client = _RecordingClient([{"load_balancer": {"id": 9, "name": "lb", "algorithm": "round_robin"}}])
    request = build_patch(LoadBalancerRequest, name="lb", region="syd", algorithm="round_robin", server_ids=[1, 2])

    lb = await LoadBalancersService(client).create(request)

    assert lb.id == 9
    assert client.calls[0][3] == {"name": "lb", "region": "syd", "algorithm": "round_robin", "server_ids": [1, 2]}


@pytest.mark.asyncio
async def test_firewall_tag_and_rule_membership() -> None:
    client = _RecordingClient()
    service = FirewallsService(client)

    await service.add_tags("fw-1", "web", "db")
    await service.remove_rules("fw-1", FirewallRulesRequest(inbound_rules=[]))

    assert client.calls[0] == ("POST", "/v2/firewalls/fw-1/tags", {}, {"tags": ["web", "db"]})
    assert client.calls[1] == ("DELETE", "/v2/firewalls/fw-1/rules", {}, {"inbound_rules": []})


@pytest.mark.asyncio
async def test_servers_list_by_tag_and_delete_by_tag_pass_tag_name() -> None:
    client = _RecordingClient([{"servers": [{"id": 1, "name": "web-1"}]}, {}])
    service = ServersService(client)

    servers = await service.list_by_tag("web")
    await service.delete_by_tag("web")

    assert [server.name for server in servers] == ["web-1"]
    assert client.calls[0] == ("GET", "/v2/servers", {"tag_name": "web", "page": 1, "per_page": 200}, None)
    assert client.calls[1] == ("DELETE", "/v2/servers", {"tag_name": "web"}, None)


@pytest.mark.asyncio
async def test_server_create_payload() -> None:
    client = _RecordingClient([{"server": {"id": 100, "name": "web-1"}}])
    request = build_patch(ServerCreateRequest, name="web-1", region="syd", size="std-min", image="ubuntu-24.04")

    server = await ServersService(client).create(request)

    assert server.id == 100
    assert client.calls[0][3] == {"name": "web-1", "region": "syd", "size": "std-min", "image": "ubuntu-24.04"}


def _paged_handler(seen: list[httpx.Request]) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path != "/v2/vpcs":
            return httpx.Response(404, json={"message": "not found"})
        page = int(request.url.params.get("page", "1"))
        if page == 1:
            return httpx.Response(
                200,
                json={
                    "vpcs": [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}],
                    "links": {"pages": {"next": f"{BASE_URL}/v2/vpcs?page=2&per_page=2"}},
                    "meta": {"total": 3},
                },
            )
        return httpx.Response(200, json={"vpcs": [{"id": 3, "name": "C"}], "links": {}, "meta": {"total": 3}})

    return handler


def _config(**profile: Any) -> dict[str, Any]:
    return {"profiles": {"default": {"access_token": "test-token", "base_url": BASE_URL, **profile}}}


@pytest.mark.asyncio
async def test_list_collects_two_pages_end_to_end() -> None:
    seen: list[httpx.Request] = []
    transport = httpx.MockTransport(_paged_handler(seen))
    async with httpx.AsyncClient(base_url=BASE_URL, transport=transport) as http_client:
        async with AsyncBinaryLaneClient(config=_config(per_page=2), http_client=http_client) as client:
            vpcs = await client.vpcs.list()

    assert [vpc.name for vpc in vpcs] == ["A", "B", "C"]
    assert len(seen) == 2
    assert [request.url.params["page"] for request in seen] == ["1", "2"]
    assert all(request.url.params["per_page"] == "2" for request in seen)
    assert seen[0].headers["Authorization"] == "Bearer test-token"


@pytest.mark.asyncio
async def test_update_sends_only_supplied_fields_end_to_end() -> None:
    bodies: list[Any] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        assert request.method == "PUT"
        assert request.url.path == "/v2/vpcs/5"
        return httpx.Response(200, json={"vpc": {"id": 5, "name": "x"}})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(base_url=BASE_URL, transport=transport) as http_client:
        async with AsyncBinaryLaneClient(config=_config(), http_client=http_client) as client:
            vpc = await client.vpcs.update(5, build_patch(VPCUpdateRequest, name="x"))

    assert vpc.name == "x"
    assert bodies == [{"name": "x"}]


def test_filter_actions() -> None:
    actions = [
        Action(
            id=1,
            resource_type="server",
            region_slug="syd",
            status="completed",
            type="reboot",
            completed_at="2015-04-02T12:00:00Z",
        ),
        Action(
            id=2,
            resource_type="vpc",
            region_slug="per",
            status="completed",
            type="create",
            completed_at="2016-04-02T12:00:00Z",
        ),
        Action(id=3, resource_type="server", region_slug="syd", status="in-progress", type="resize"),
    ]

    assert [a.id for a in filter_actions(actions)] == [1, 2, 3]
    assert [a.id for a in filter_actions(actions, region="per")] == [2]
    assert [a.id for a in filter_actions(actions, region="bne")] == []
    assert [a.id for a in filter_actions(actions, status="completed")] == [1, 2]
    assert [a.id for a in filter_actions(actions, resource_type="server", action_type="resize")] == [3]
    assert [a.id for a in filter_actions(actions, before="2016-01-01T00:00:00-04:00")] == [1]
    assert [a.id for a in filter_actions(actions, after="2016-01-01T00:00:00-04:00")] == [2]


def test_filter_actions_rejects_bad_timestamp() -> None:
    with pytest.raises(InvalidArgumentError, match="after"):
        filter_actions([], after="yesterday")


def test_filter_actions_reads_timestamps_without_offset_as_utc() -> None:
    actions = [
        Action(id=1, completed_at="2016-04-02T12:00:00Z"),
        Action(id=2, completed_at="2015-04-02T12:00:00"),
    ]

    assert [a.id for a in filter_actions(actions, after="2016-01-01T00:00:00")] == [1]
    assert [a.id for a in filter_actions(actions, before="2016-01-01T00:00:00Z")] == [2]
    assert [a.id for a in filter_actions(actions, after="2016-04-02T11:00:00", before="2016-04-02T13:00:00")] == [1]


@pytest.mark.asyncio
async def test_account_regions_and_balance() -> None:
    client = _RecordingClient(
        [
            {"account": {"email": "ops@example.com", "server_limit": 20}},
            {"regions": [{"slug": "syd", "name": "Sydney", "available": True}]},
            {"month_to_date_balance": "-12.50", "account_balance": "100.00"},
        ]
    )

    account = await AccountService(client).get()
    regions = await RegionsService(client).list()
    balance = await BalanceService(client).get()

    assert account.email == "ops@example.com"
    assert [region.slug for region in regions] == ["syd"]
    assert balance.month_to_date_balance == "-12.50"
    assert [call[1] for call in client.calls] == ["/v2/account", "/v2/regions", "/v2/customers/my/balance"]


@pytest.mark.parametrize(
    ("response", "message"),
    [
        ({"vpc": {"name": "no-id"}}, "unexpected vpc payload"),
        ({}, "no 'vpc' object"),
        ({"vpc": ["not", "an", "object"]}, "expected an object"),
    ],
)
@pytest.mark.asyncio
async def test_malformed_resource_body_raises_request_error(response: dict[str, Any], message: str) -> None:
    with pytest.raises(RequestError, match=message):
        await VPCsService(_RecordingClient([response])).get(7)


@pytest.mark.asyncio
async def test_malformed_list_and_account_bodies_raise_request_error() -> None:
    client = _RecordingClient([{"vpcs": [{"name": "no-id"}]}, {"vpcs": {"id": 1}}, {}, {}])

    with pytest.raises(RequestError, match="unexpected vpcs payload"):
        await VPCsService(client).list()
    with pytest.raises(RequestError, match="expected a list"):
        await VPCsService(client).list()
    with pytest.raises(RequestError, match="no 'account' object"):
        await AccountService(client).get()
    with pytest.raises(RequestError, match="empty balance body"):
        await BalanceService(client).get()
