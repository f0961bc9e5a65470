from __future__ import annotations

from pydantic import Field

from blcli.models.common import BLModel, Region
from blcli.patch import PatchRequest


class ForwardingRule(BLModel):
    entry_protocol: str = ""
    entry_port: int = 0
    target_protocol: str = ""
    target_port: int = 0
    certificate_id: str = ""
    tls_passthrough: bool = False

    def describe(self) -> str:
        return (
            f"entry_protocol:{self.entry_protocol},entry_port:{self.entry_port},"
            f"target_protocol:{self.target_protocol},target_port:{self.target_port},"
            f"certificate_id:{self.certificate_id},tls_passthrough:{str(self.tls_passthrough).lower()}"
        )


class HealthCheck(BLModel):
    protocol: str = ""
    port: int = 0
    path: str = ""
    check_interval_seconds: int = 0
    response_timeout_seconds: int = 0
    healthy_threshold: int = 0
    unhealthy_threshold: int = 0

    def describe(self) -> str:
        return (
            f"protocol:{self.protocol},port:{self.port},path:{self.path},"
            f"check_interval_seconds:{self.check_interval_seconds},"
            f"response_timeout_seconds:{self.response_timeout_seconds},"
            f"healthy_threshold:{self.healthy_threshold},unhealthy_threshold:{self.unhealthy_threshold}"
        )


class StickySessions(BLModel):
    type: str = ""
    cookie_name: str = ""
    cookie_ttl_seconds: int = 0

    def describe(self) -> str:
        return f"type:{self.type},cookie_name:{self.cookie_name},cookie_ttl_seconds:{self.cookie_ttl_seconds}"


class LoadBalancer(BLModel):
    id: int
    name: str = ""
    ip: str = ""
    size: str = ""
    algorithm: str = ""
    status: str = ""
    created_at: str | None = None
    forwarding_rules: list[ForwardingRule] = Field(default_factory=list)
    health_check: HealthCheck | None = None
    sticky_sessions: StickySessions | None = None
    region: Region | None = None
    tag: str = ""
    server_ids: list[int] = Field(default_factory=list)
    redirect_http_to_https: bool = False
    enable_proxy_protocol: bool = False
    enable_backend_keepalive: bool = False
    vpc_id: int | None = None


class LoadBalancerRequest(PatchRequest):
    name: str | None = None
    algorithm: str | None = None
    region: str | None = None
    size: str | None = None
    forwarding_rules: list[ForwardingRule] | None = None
    health_check: HealthCheck | None = None
    sticky_sessions: StickySessions | None = None
    server_ids: list[int] | None = None
    tag: str | None = None
    redirect_http_to_https: bool | None = None
    enable_proxy_protocol: bool | None = None
    enable_backend_keepalive: bool | None = None
    vpc_id: int | None = None
