# src/buildflags/flags/flag_messages.py
"""Human-readable text about unknown, active, and available flags."""

from collections.abc import Sequence

from buildflags.utils import BG_RED, BOLD, WHITE, style, terminal_link

from .flag_types import ExecutionContext, FlagDefinition, UnknownFlag


UNKNOWN_FLAGS_HEADER = "The following flag(s) found in your config are not known:"
ACTIVE_FLAGS_HEADER = "The following flags are active:"
EXPERIMENTAL_LABEL = "EXPERIMENTAL"
UMBRELLA_ISSUE_LABEL = "Umbrella Issue"


def build_unknown_flags_message(unknown: Sequence[UnknownFlag]) -> str:
    """Return the warning about unknown flags, or "" if there are none."""
    if not unknown:
        return ""
    lines = [UNKNOWN_FLAGS_HEADER]
    for flag in unknown:
        line = f"- {flag.name}"
        if flag.did_you_mean:
            line += f" (did you mean: {flag.did_you_mean})"
        lines.append(line)
    return "\n".join(lines)


def format_flag_line(flag: FlagDefinition, context: ExecutionContext) -> str:
    line = f"- {flag.name}"
    if flag.experimental:
        marker = style(
            EXPERIMENTAL_LABEL,
            BOLD,
            WHITE,
            BG_RED,
            enable_color=context.enable_color,
        )
        line += f" · {marker}"
    if flag.umbrella_issue:
        link = terminal_link(
            UMBRELLA_ISSUE_LABEL,
            flag.umbrella_issue,
            enabled=context.enable_links,
        )
        line += f" · ({link})"
    line += f" · {flag.description}"
    return line


def build_active_flags_message(
    enabled: Sequence[FlagDefinition],
    catalog: Sequence[FlagDefinition],
    context: ExecutionContext,
) -> str:
    """Describe the active flags, then the ones still available.

    Returns "" when nothing is enabled.
    """
    if not enabled:
        return ""

    lines = [ACTIVE_FLAGS_HEADER]
    lines.extend(format_flag_line(flag, context) for flag in enabled)

    other_count = len(catalog) - len(enabled)
    if other_count > 0:
        there = (
            "There is one other flag"
            if other_count == 1
            else f"There are {other_count} other flags"
        )
        lines.append("")
        lines.append(f"{there} available that you might be interested in:")
        enabled_names = {flag.name for flag in enabled}
        lines.extend(
            format_flag_line(flag, context)
            for flag in catalog
            if flag.name not in enabled_names
        )

    return "\n".join(lines) + "\n"
