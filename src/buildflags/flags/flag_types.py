# src/buildflags/flags/flag_types.py

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypedDict

from apathetic_utils import is_ci as detect_ci
from typing_extensions import NotRequired

from buildflags.constants import COMMAND_ALL, DEFAULT_ENV_EXECUTING_COMMAND
from buildflags.logs import getAppLogger
from buildflags.meta import PROGRAM_ENV
from buildflags.utils import supports_hyperlinks


# name → requested state, as written in the user's config
UserSelections = Mapping[str, bool]


# Raw catalog entry as read from a file; everything but `name` may be absent
class FlagConfig(TypedDict, total=False):
    name: str
    description: str
    command: str  # "all" or a single command name
    experimental: bool
    no_ci: bool  # suppressed when running in CI
    umbrella_issue: NotRequired[str]  # tracking URL
    included_flags: list[str]  # pulled in when this flag is enabled


class FlagsConfig(TypedDict, total=False):
    flags: dict[str, bool]
    catalog: list[FlagConfig]
    command: str
    log_level: str


@dataclass(frozen=True)
class FlagDefinition:
    name: str
    description: str = ""
    command: str = COMMAND_ALL
    experimental: bool = False
    no_ci: bool = False
    umbrella_issue: str | None = None
    included_flags: tuple[str, ...] = ()


@dataclass(frozen=True)
class ExecutionContext:
    """Where the resolution happens and how its messages render."""

    executing_command: str | None
    is_ci: bool
    enable_color: bool = False
    enable_links: bool = False

    @classmethod
    def from_environment(
        cls,
        executing_command: str | None = None,
        *,
        is_ci: bool | None = None,
        enable_color: bool | None = None,
        enable_links: bool | None = None,
    ) -> "ExecutionContext":
        """Fill every unset value from the process environment."""
        if executing_command is None:
            executing_command = os.getenv(
                f"{PROGRAM_ENV}_{DEFAULT_ENV_EXECUTING_COMMAND}"
            ) or os.getenv(DEFAULT_ENV_EXECUTING_COMMAND)
        return cls(
            executing_command=executing_command,
            is_ci=detect_ci() if is_ci is None else is_ci,
            enable_color=(
                getAppLogger().enable_color if enable_color is None else enable_color
            ),
            enable_links=(
                supports_hyperlinks() if enable_links is None else enable_links
            ),
        )


@dataclass
class UnknownFlag:
    name: str
    did_you_mean: str | None = None


@dataclass
class FlagResolution:
    """Outcome of one resolution; hand it to whoever needs the active flags."""

    enabled: list[FlagDefinition] = field(default_factory=list)
    warning_text: str = ""
    info_text: str = ""
    unknown: list[UnknownFlag] = field(default_factory=list)

    @property
    def enabled_names(self) -> list[str]:
        return [flag.name for flag in self.enabled]

    def is_enabled(self, name: str) -> bool:
        return any(flag.name == name for flag in self.enabled)
