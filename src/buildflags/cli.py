# src/buildflags/cli.py

import argparse
import platform
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from apathetic_logging import safeLog

from .constants import DEFAULT_STRICT, DID_YOU_MEAN_THRESHOLD, LOG_LEVEL_CHOICES
from .flags import (
    ExecutionContext,
    FlagDefinition,
    FlagResolution,
    FlagsConfig,
    extract_selections,
    load_and_parse_config,
    load_catalog,
    parse_catalog,
    resolve_flags,
)
from .logs import getAppLogger
from .meta import PROGRAM_SCRIPT
from .utils import closest_match


# errors that carry a message meant for the user; anything else is a bug
USER_ERRORS = (FileNotFoundError, ValueError, TypeError, RuntimeError)


# --------------------------------------------------------------------------- #
# CLI setup and helpers
# --------------------------------------------------------------------------- #


class HintingArgumentParser(argparse.ArgumentParser):
    """Suggests the nearest known option for a mistyped one."""

    def suggest_option(self, arg: str) -> str | None:
        option = arg.split("=", 1)[0]
        known = (opt for action in self._actions for opt in action.option_strings)
        candidate, distance = closest_match(option, known)
        if distance is None or distance >= DID_YOU_MEAN_THRESHOLD:
            return None
        return candidate

    def error(self, message: str) -> NoReturn:
        lines = [f"{self.prog}: error: {message}"]
        _, _, unrecognized = message.partition("unrecognized arguments:")
        for arg in unrecognized.split():
            suggestion = self.suggest_option(arg) if arg.startswith("-") else None
            if suggestion:
                lines.append(f"Hint: did you mean {suggestion}?")

        self.print_usage(sys.stderr)
        self.exit(2, "\n".join(lines) + "\n")


def _setup_parser() -> argparse.ArgumentParser:
    """Define and return the CLI argument parser."""
    parser = HintingArgumentParser(
        prog=PROGRAM_SCRIPT,
        description="Resolve feature flags from your config against a catalog.",
    )

    parser.add_argument("-c", "--config", help="Path to the flags config file.")
    parser.add_argument(
        "--catalog",
        help="Path to a flag catalog file (overrides the config's `catalog`).",
    )
    parser.add_argument(
        "--command",
        help=(
            "Build command being executed "
            "(default: config, then $BUILDFLAGS_EXECUTING_COMMAND / "
            "$EXECUTING_COMMAND)."
        ),
    )

    ci = parser.add_mutually_exclusive_group()
    ci.add_argument(
        "--ci",
        dest="is_ci",
        action="store_const",
        const=True,
        help="Resolve as if running in CI.",
    )
    ci.add_argument(
        "--no-ci",
        dest="is_ci",
        action="store_const",
        const=False,
        help="Resolve as if running locally.",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=DEFAULT_STRICT,
        help="Exit with an error when the config names unknown flags.",
    )
    parser.add_argument(
        "--names",
        action="store_true",
        help="Print only the enabled flag names, one per line.",
    )
    parser.add_argument(
        "--no-color",
        dest="enable_color",
        action="store_const",
        const=False,
        help="Disable ANSI colors in output.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        default=None,
        dest="log_level",
        help="Set log verbosity level.",
    )

    return parser


@dataclass
class _LoadedInputs:
    """Everything needed for one resolution."""

    config_path: Path | None
    config: FlagsConfig
    catalog: list[FlagDefinition]
    selections: dict[str, bool]


def _initialize_logger(args: argparse.Namespace) -> None:
    """Initialize logger with CLI args, env vars, and defaults."""
    logger = getAppLogger()
    logger.setLevel(logger.determineLogLevel(args=args))
    if getattr(args, "enable_color", None) is not None:
        logger.enable_color = args.enable_color
    else:
        logger.enable_color = logger.determineColorEnabled()
    logger.trace("[BOOT] log-level initialized: %s", logger.levelName)

    logger.debug(
        "Runtime: Python %s (%s)",
        platform.python_version(),
        platform.python_implementation(),
    )


def _load_inputs(args: argparse.Namespace, cwd: Path) -> _LoadedInputs:
    """Load config and catalog; the CLI's --catalog wins over the config."""
    logger = getAppLogger()

    config_path: Path | None = None
    config: FlagsConfig = {}
    loaded = load_and_parse_config(args, cwd)
    if loaded is not None:
        config_path, config = loaded
        logger.info("🔧 Using config: %s", config_path.name)
        if getattr(args, "log_level", None) is None and config.get("log_level"):
            logger.setLevel(
                logger.determineLogLevel(
                    args=args, root_log_level=config.get("log_level")
                )
            )

    if getattr(args, "catalog", None):
        catalog = load_catalog(Path(args.catalog).expanduser().resolve())
    else:
        catalog = parse_catalog(config.get("catalog"))

    if not catalog:
        logger.warning("No flag catalog given; every flag will be reported unknown.")

    return _LoadedInputs(
        config_path=config_path,
        config=config,
        catalog=catalog,
        selections=extract_selections(config),
    )


def _build_context(
    args: argparse.Namespace, config: FlagsConfig
) -> ExecutionContext:
    command = getattr(args, "command", None) or config.get("command")
    return ExecutionContext.from_environment(
        command,
        is_ci=getattr(args, "is_ci", None),
        enable_color=getAppLogger().enable_color,
    )


def _report(resolution: FlagResolution, args: argparse.Namespace) -> None:
    logger = getAppLogger()

    if resolution.warning_text:
        logger.warning("%s", resolution.warning_text)

    if getattr(args, "names", False):
        for name in resolution.enabled_names:
            print(name)  # noqa: T201
        return

    if resolution.info_text:
        logger.info("%s", resolution.info_text.rstrip("\n"))
    else:
        logger.info("No flags are active.")


def _report_failure(error: Exception) -> int:
    """Log why the run stopped; with debug logging the traceback is kept."""
    logger = getAppLogger()
    try:
        if isinstance(error, USER_ERRORS):
            logger.errorIfNotDebug(str(error))
        else:
            logger.criticalIfNotDebug("Unexpected internal error: %s", error)
    except Exception:  # noqa: BLE001
        safeLog(f"[FATAL] Logging failed while reporting: {error}")
    return 1


def _run(argv: list[str] | None) -> int:
    args = _setup_parser().parse_args(argv)
    _initialize_logger(args)

    inputs = _load_inputs(args, Path.cwd().resolve())
    context = _build_context(args, inputs.config)
    resolution = resolve_flags(inputs.catalog, inputs.selections, context)
    _report(resolution, args)

    if getattr(args, "strict", False) and resolution.unknown:
        getAppLogger().error(
            "Strict mode: %d unknown flag(s) in config.", len(resolution.unknown)
        )
        return 1
    return 0


# --------------------------------------------------------------------------- #
# Main entry
# --------------------------------------------------------------------------- #


def main(argv: list[str] | None = None) -> int:
    try:
        return _run(argv)
    except Exception as e:  # noqa: BLE001
        return _report_failure(e)
