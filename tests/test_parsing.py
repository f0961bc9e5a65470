from __future__ import annotations

import pytest

from blcli.errors import InvalidArgumentError
from blcli.parsing import (
    parse_forwarding_rules,
    parse_health_check,
    parse_ids,
    parse_inbound_rules,
    parse_list,
    parse_outbound_rules,
    parse_pairs,
    parse_sticky_sessions,
)


def test_parse_pairs_keeps_repeated_keys_and_empty_values() -> None:
    assert parse_pairs("rules", "address:1.2.3.4,address:5.6.7.8,tag:") == [
        ("address", "1.2.3.4"),
        ("address", "5.6.7.8"),
        ("tag", ""),
    ]


def test_parse_pairs_rejects_missing_separator() -> None:
    with pytest.raises(InvalidArgumentError, match="key:value"):
        parse_pairs("rules", "protocol:tcp,ports")


def test_parse_multiple_forwarding_rules() -> None:
    rules = parse_forwarding_rules(
        "entry_protocol:http,entry_port:80,target_protocol:http,target_port:8080 "
        "entry_protocol:https,entry_port:443,target_protocol:https,target_port:443,tls_passthrough:true"
    )

    assert len(rules) == 2
    assert rules[0].entry_port == 80
    assert rules[0].target_port == 8080
    assert rules[1].tls_passthrough is True
    assert rules[1].describe().endswith("tls_passthrough:true")


def test_forwarding_rule_rejects_unknown_key() -> None:
    with pytest.raises(InvalidArgumentError, match="entry_proto"):
        parse_forwarding_rules("entry_proto:http")


def test_forwarding_rule_rejects_bad_port() -> None:
    with pytest.raises(InvalidArgumentError, match="forwarding-rules"):
        parse_forwarding_rules("entry_protocol:http,entry_port:eighty")


def test_parse_health_check_and_sticky_sessions() -> None:
    health_check = parse_health_check("protocol:http,port:80,path:/health,check_interval_seconds:10")
    sticky = parse_sticky_sessions("type:cookies,cookie_name:lb,cookie_ttl_seconds:300")

    assert health_check.path == "/health"
    assert health_check.check_interval_seconds == 10
    assert sticky.cookie_ttl_seconds == 300
    assert sticky.describe() == "type:cookies,cookie_name:lb,cookie_ttl_seconds:300"


def test_parse_inbound_rules_collects_sources() -> None:
    rules = parse_inbound_rules(
        "protocol:tcp,ports:22,address:0.0.0.0/0,address:::/0 protocol:tcp,ports:80,server_id:100,tag:web"
    )

    assert rules[0].sources is not None
    assert rules[0].sources.addresses == ["0.0.0.0/0", "::/0"]
    assert rules[1].sources is not None
    assert rules[1].sources.server_ids == [100]
    assert rules[1].sources.tags == ["web"]
    assert rules[1].describe() == "protocol:tcp,ports:80,tag:web,server_id:100"


def test_parse_outbound_rules_uses_destinations() -> None:
    rules = parse_outbound_rules("protocol:udp,ports:53,load_balancer_uid:lb-1")

    assert rules[0].destinations is not None
    assert rules[0].destinations.load_balancer_uids == ["lb-1"]


def test_firewall_rule_requires_protocol() -> None:
    with pytest.raises(InvalidArgumentError, match="protocol"):
        parse_inbound_rules("ports:22,address:0.0.0.0/0")


def test_parse_list_and_ids() -> None:
    assert parse_list(None) is None
    assert parse_list("web, db,,") == ["web", "db"]
    assert parse_ids("server-ids", "1,2,3") == [1, 2, 3]
    assert parse_ids("server-ids", None) is None

    with pytest.raises(InvalidArgumentError, match="server-ids"):
        parse_ids("server-ids", "1,two")
