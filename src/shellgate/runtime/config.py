"""Gateway configuration — timeouts and the allow-list seed."""

from __future__ import annotations

from pydantic import BaseModel, Field

from shellgate.runtime.policy.models import DEFAULT_ALLOWED_COMMANDS


class GatewayConfig(BaseModel):
    """Configuration for an :class:`~shellgate.runtime.gateway.ExecutionGateway`."""

    max_timeout: float = Field(default=60.0, gt=0, description="Upper bound on any execution, in seconds.")
    allowed_commands: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_COMMANDS),
        description="Initial allow-list of command basenames.",
    )
    drain_timeout: float = Field(
        default=1.0,
        gt=0,
        description="Seconds to wait for output pipes to close after a kill.",
    )
