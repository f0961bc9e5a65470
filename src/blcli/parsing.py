"""Parsers for the `key:value,...` rule arguments accepted by the CLI.

Multiple rules are separated by whitespace, for example::

    entry_protocol:http,entry_port:80,target_protocol:http,target_port:80 entry_protocol:tcp,...
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ValidationError

from blcli.errors import InvalidArgumentError
from blcli.models.firewalls import Destinations, InboundRule, OutboundRule, Sources
from blcli.models.load_balancers import ForwardingRule, HealthCheck, StickySessions

M = TypeVar("M", bound=BaseModel)

_TARGET_KEYS = {
    "address": "addresses",
    "tag": "tags",
    "server_id": "server_ids",
    "load_balancer_uid": "load_balancer_uids",
}


def parse_pairs(argument: str, raw: str) -> list[tuple[str, str]]:
    """Split `key:value,key:value` into ordered pairs; repeated keys are kept."""

    pairs: list[tuple[str, str]] = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        key, sep, value = chunk.partition(":")
        if not sep or not key:
            raise InvalidArgumentError(argument, f"'{chunk}' is not a key:value pair")
        pairs.append((key.strip(), value.strip()))
    return pairs


def _build(argument: str, model: type[M], raw: str) -> M:
    values: dict[str, Any] = {}
    for key, value in parse_pairs(argument, raw):
        if key not in model.model_fields:
            allowed = ", ".join(model.model_fields)
            raise InvalidArgumentError(argument, f"unexpected key '{key}'; expected one of {allowed}")
        values[key] = value
    try:
        return model.model_validate(values)
    except ValidationError as exc:
        raise InvalidArgumentError(argument, str(exc.errors()[0]["msg"]).lower()) from exc


def parse_forwarding_rules(raw: str) -> list[ForwardingRule]:
    return [_build("forwarding-rules", ForwardingRule, rule) for rule in raw.split()]


def parse_health_check(raw: str) -> HealthCheck:
    return _build("health-check", HealthCheck, raw)


def parse_sticky_sessions(raw: str) -> StickySessions:
    return _build("sticky-sessions", StickySessions, raw)


def _parse_firewall_rule(argument: str, raw: str, direction: Literal["inbound", "outbound"]) -> InboundRule | OutboundRule:
    protocol = ""
    ports = ""
    targets: dict[str, list[str]] = {field: [] for field in _TARGET_KEYS.values()}
    for key, value in parse_pairs(argument, raw):
        if key == "protocol":
            protocol = value
        elif key == "ports":
            ports = value
        elif key in _TARGET_KEYS:
            if value:
                targets[_TARGET_KEYS[key]].append(value)
        else:
            raise InvalidArgumentError(argument, f"unexpected key '{key}'")
    if not protocol:
        raise InvalidArgumentError(argument, "every rule needs a protocol")

    try:
        if direction == "inbound":
            return InboundRule(protocol=protocol, ports=ports, sources=Sources.model_validate(targets))
        return OutboundRule(protocol=protocol, ports=ports, destinations=Destinations.model_validate(targets))
    except ValidationError as exc:
        raise InvalidArgumentError(argument, str(exc.errors()[0]["msg"]).lower()) from exc


def parse_inbound_rules(raw: str) -> list[InboundRule]:
    return [_parse_firewall_rule("inbound-rules", rule, "inbound") for rule in raw.split()]


def parse_outbound_rules(raw: str) -> list[OutboundRule]:
    return [_parse_firewall_rule("outbound-rules", rule, "outbound") for rule in raw.split()]


def parse_list(raw: str | None) -> list[str] | None:
    """Split a comma separated option; `None` when the option was not given."""

    if raw is None:
        return None
    return [item.strip() for item in raw.split(",") if item.strip()]


def parse_ids(argument: str, raw: str | None) -> list[int] | None:
    items = parse_list(raw)
    if items is None:
        return None
    try:
        return [int(item) for item in items]
    except ValueError as exc:
        raise InvalidArgumentError(argument, f"'{raw}' is not a comma separated list of integers") from exc
