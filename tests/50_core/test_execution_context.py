# tests/50_core/test_execution_context.py

import pytest

import buildflags.flags.flag_types as mod_flag_types


def test_from_environment_explicit_values_win(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # --- patch ---
    monkeypatch.setenv("EXECUTING_COMMAND", "develop")
    monkeypatch.setenv("CI", "1")

    # --- execute ---
    context = mod_flag_types.ExecutionContext.from_environment(
        "build", is_ci=False, enable_color=True, enable_links=True
    )

    # --- verify ---
    assert context == mod_flag_types.ExecutionContext(
        executing_command="build",
        is_ci=False,
        enable_color=True,
        enable_links=True,
    )


def test_from_environment_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # --- patch ---
    monkeypatch.setenv("EXECUTING_COMMAND", "develop")
    monkeypatch.setenv("GITHUB_ACTIONS", "true")

    # --- execute ---
    context = mod_flag_types.ExecutionContext.from_environment()

    # --- verify ---
    assert context.executing_command == "develop"
    assert context.is_ci is True
    assert context.enable_links is False  # never in CI


def test_program_env_var_beats_generic(monkeypatch: pytest.MonkeyPatch) -> None:
    # --- patch ---
    monkeypatch.setenv("EXECUTING_COMMAND", "develop")
    monkeypatch.setenv("BUILDFLAGS_EXECUTING_COMMAND", "serve")

    # --- execute and verify ---
    assert mod_flag_types.ExecutionContext.from_environment().executing_command == (
        "serve"
    )


def test_no_command_anywhere() -> None:
    # --- execute ---
    context = mod_flag_types.ExecutionContext.from_environment()

    # --- verify ---
    assert context.executing_command is None
    assert context.is_ci is False


def test_from_environment_asks_ci_detection(monkeypatch: pytest.MonkeyPatch) -> None:
    # --- patch ---
    monkeypatch.setattr(mod_flag_types, "detect_ci", lambda: True)

    # --- execute and verify ---
    assert mod_flag_types.ExecutionContext.from_environment().is_ci is True
    assert (
        mod_flag_types.ExecutionContext.from_environment(is_ci=False).is_ci is False
    )
