"""Commands of a pipeline: parsing their specifications and listing them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from pipechain.paths import Environment, find_path
from pipechain.printf import sformat
from pipechain.transform import split


@dataclass
class Command:
    """One program of a pipeline: its argument vector and resolved path."""

    argv: List[str]
    path: Optional[str]
    pid: Optional[int] = None

    @property
    def name(self) -> str:
        return self.argv[0]


def parse_command(spec: str, env: Environment) -> Command:
    """Split spec on spaces and resolve its first word through env's PATH."""
    argv = split(spec, " ")
    if not argv:
        raise ValueError(f"empty command: {spec!r}")
    return Command(argv=argv, path=find_path(env, argv[0]))


def create_commands(specs: Iterable[str], env: Environment) -> List[Command]:
    """Parse every specification, keeping their order."""
    if not isinstance(env, dict) and not hasattr(env, "get"):
        env = list(env)
    return [parse_command(spec, env) for spec in specs]


def format_commands(commands: Iterable[Command]) -> str:
    """List each command's name and path, as a blank line, the name, then the path."""
    return "".join(
        sformat("\n%s\n", command.name) + sformat("%s\n", command.path)
        for command in commands
    )