"""Default allow-list seed, grouped by the kind of tool."""

from __future__ import annotations

COMMAND_CATEGORIES: dict[str, tuple[str, ...]] = {
    "package managers": ("npm", "yarn", "pnpm", "bun"),
    "version control": ("git",),
    "filesystem": ("ls", "dir", "find", "mkdir", "rmdir", "cp", "mv", "rm", "cat"),
    "development tools": ("node", "python", "python3", "tsc", "eslint", "prettier"),
    "build tools": ("make", "cargo", "go"),
    "container tools": ("docker", "docker-compose"),
    "utilities": ("echo", "touch", "grep"),
}

DEFAULT_ALLOWED_COMMANDS: tuple[str, ...] = tuple(
    name for names in COMMAND_CATEGORIES.values() for name in names
)


def categorize(commands: list[str]) -> dict[str, list[str]]:
    """Group *commands* by their seed category.

    Commands that are not part of the default seed land under ``"other"``.
    Order within each group follows *commands*.
    """
    lookup = {name: category for category, names in COMMAND_CATEGORIES.items() for name in names}
    grouped: dict[str, list[str]] = {}
    for name in commands:
        grouped.setdefault(lookup.get(name, "other"), []).append(name)
    return grouped
