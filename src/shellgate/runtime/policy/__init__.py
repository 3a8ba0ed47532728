"""Policy subsystem — which commands may run."""

from shellgate.runtime.policy.allowlist import CommandAllowList
from shellgate.runtime.policy.models import COMMAND_CATEGORIES, DEFAULT_ALLOWED_COMMANDS, categorize

__all__ = [
    "COMMAND_CATEGORIES",
    "CommandAllowList",
    "DEFAULT_ALLOWED_COMMANDS",
    "categorize",
]
