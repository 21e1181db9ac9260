"""CLI config stories: display, JSON format, sections, profile reloads."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from app_secret_config.adapters import cli as cli_mod

if TYPE_CHECKING:
    from app_secret_config.composition import AppServices


@pytest.mark.os_agnostic
def test_when_config_is_invoked_it_displays_configuration(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=production_factory)

    assert result.exit_code == 0


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_it_outputs_json(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    # stdout only; log records go to stderr
    assert "{" in result.stdout
    assert "IntegrationConfiguration" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_mocked_data_it_displays_sections(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    factory = config_cli_context({"lib_log_rich": {"environment": "staging", "console_level": "INFO"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "lib_log_rich" in result.output
    assert "staging" in result.output


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_section_it_shows_provider_entries(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
    integration_tree: Callable[..., dict[str, Any]],
) -> None:
    factory = config_cli_context(integration_tree({"Name": "Contracting", "Username": "svc-contracting"}))

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", "json", "--section", "IntegrationConfiguration"], obj=factory
    )

    assert result.exit_code == 0
    assert "ProviderConfiguration" in result.stdout
    assert "svc-contracting" in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", ["human", "json"])
def test_when_config_section_is_missing_it_fails_with_invalid_argument(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
    integration_tree: Callable[..., dict[str, Any]],
    output_format: str,
) -> None:
    factory = config_cli_context(integration_tree())

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", output_format, "--section", "Contracting"], obj=factory
    )

    assert result.exit_code == 22
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_profile_it_reloads_with_that_profile(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_services: Callable[..., Callable[[], AppServices]],
) -> None:
    captured_profiles: list[str | None] = []
    config = config_factory({"lib_log_rich": {"environment": "test"}})

    def _capture(*, profile: str | None = None, **_kwargs: Any) -> Config:
        captured_profiles.append(profile)
        return config

    factory = inject_services(get_config=_capture)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--profile", "staging"], obj=factory)

    assert result.exit_code == 0
    assert captured_profiles == [None, "staging"]


@pytest.mark.os_agnostic
def test_when_config_subcommand_profile_reloads_it_preserves_root_set_overrides(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_services: Callable[..., Callable[[], AppServices]],
    integration_tree: Callable[..., dict[str, Any]],
) -> None:
    """``--set`` at the root survives a profile reload inside ``config``."""
    base_config = config_factory(integration_tree())

    def _reload(*, profile: str | None = None, **_kwargs: Any) -> Config:
        return base_config

    factory = inject_services(get_config=_reload)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        [
            "--set",
            'IntegrationConfiguration.ProviderConfiguration=[{"Name":"overridden"}]',
            "config",
            "--profile",
            "test",
            "--format",
            "json",
        ],
        obj=factory,
    )

    assert result.exit_code == 0
    assert "overridden" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_subcommand_profile_is_invalid_it_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--profile", "../x"], obj=production_factory)

    assert result.exit_code == 2
    assert "--profile" in result.output
