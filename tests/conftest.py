"""Shared pytest fixtures for domain, CLI and module-entry tests.

- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from app_secret_config.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output and ``result.stderr`` for error
    messages; ``result.output`` interleaves both.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from app_secret_config.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before and after each test."""
    from app_secret_config.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield
    config_mod.get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts, without file I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def integration_tree() -> Callable[..., dict[str, Any]]:
    """Return a helper building a config dict whose provider list holds the given entries in order."""

    def _tree(*providers: dict[str, Any]) -> dict[str, Any]:
        return {"IntegrationConfiguration": {"ProviderConfiguration": list(providers)}}

    return _tree


@pytest.fixture
def contracting_entry() -> dict[str, Any]:
    """A provider entry in the legacy marker-key style."""
    return {"Contracting": True, "Username": "u", "Password": "p"}


@pytest.fixture
def inject_services(
    clear_config_cache: None,
) -> Callable[..., Callable[[], AppServices]]:
    """Return a factory producing production services with selected ports replaced.

    Example:
        def test_no_lookup(cli_runner, inject_services) -> None:
            factory = inject_services(load_integration_configuration=explode)
            cli_runner.invoke(cli, ["ManageTestConfiguration"], obj=factory)
    """
    from app_secret_config.composition import build_production

    def _inject(**ports: Any) -> Callable[[], AppServices]:
        services = replace(build_production(), **ports)
        return lambda: services

    return _inject


@pytest.fixture
def config_cli_context(
    inject_services: Callable[..., Callable[[], AppServices]],
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a CLI services factory.

    Example:
        def test_lookup(cli_runner, config_cli_context) -> None:
            factory = config_cli_context(integration_tree({"Name": "Contracting"}))
            result = cli_runner.invoke(cli, ["ManageConfiguration"], obj=factory)
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        return inject_services(get_config=_fake_get_config)

    return _create
