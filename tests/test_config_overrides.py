"""``--set SECTION.KEY=VALUE`` parsing, coercion and merging.

Example-based cases use the integration section the verbs read; the
property-based cases at the bottom check the parser contract for any
well-formed or malformed input.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from lib_layered_config import Config

from app_secret_config.adapters.config.overrides import (
    ConfigOverride,
    apply_overrides,
    coerce_value,
    parse_override,
)

identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True)


def _providers(config: Config) -> Any:
    return config.as_dict()["IntegrationConfiguration"]["ProviderConfiguration"]


# ======================== parse_override ========================


@pytest.mark.os_agnostic
def test_parse_override_reads_provider_list() -> None:
    result = parse_override('IntegrationConfiguration.ProviderConfiguration=[{"Name":"Contracting"}]')

    assert result == ConfigOverride(
        section="IntegrationConfiguration",
        key_path=("ProviderConfiguration",),
        value=[{"Name": "Contracting"}],
    )


@pytest.mark.os_agnostic
def test_parse_override_nested_key() -> None:
    result = parse_override("lib_log_rich.payload_limits.message_max_chars=8192")

    assert result.key_path == ("payload_limits", "message_max_chars")
    assert result.value == 8192


@pytest.mark.os_agnostic
def test_parse_override_keeps_equals_inside_value() -> None:
    assert parse_override("section.Password=p=ss").value == "p=ss"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("IntegrationConfiguration", "must contain '='"),
        ("Contracting=true", "at least one dot"),
        (".ProviderConfiguration=[]", "section name is empty"),
        ("IntegrationConfiguration.=[]", "empty component"),
        ("IntegrationConfiguration..Name=x", "empty component"),
        ("=", "at least one dot"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


# ======================== coerce_value ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("false", False),
        ("42", 42),
        ("-1.5", -1.5),
        ("null", None),
        ("[]", []),
        ('{"Username": "u"}', {"Username": "u"}),
        ("svc-contracting", "svc-contracting"),
        ("two words", "two words"),
        ("", ""),
    ],
)
def test_coerce_value(raw: str, expected: object) -> None:
    assert coerce_value(raw) == expected


# ======================== apply_overrides ========================


@pytest.mark.os_agnostic
def test_apply_overrides_without_overrides_returns_same_instance() -> None:
    config = Config({"IntegrationConfiguration": {"ProviderConfiguration": []}}, {})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_replaces_provider_list() -> None:
    config = Config({"IntegrationConfiguration": {"ProviderConfiguration": [{"Name": "Billing"}]}}, {})

    merged = apply_overrides(config, ('IntegrationConfiguration.ProviderConfiguration=[{"Name":"Contracting"}]',))

    assert _providers(merged) == [{"Name": "Contracting"}]


@pytest.mark.os_agnostic
def test_apply_overrides_creates_missing_section() -> None:
    config = Config({"lib_log_rich": {"environment": "prod"}}, {})

    merged = apply_overrides(config, ("IntegrationConfiguration.ProviderConfiguration=[]",))

    assert _providers(merged) == []
    assert merged.as_dict()["lib_log_rich"] == {"environment": "prod"}


@pytest.mark.os_agnostic
def test_apply_overrides_merges_sibling_keys() -> None:
    config = Config({"lib_log_rich": {"console_level": "INFO", "environment": "prod"}}, {})

    merged = apply_overrides(config, ("lib_log_rich.console_level=DEBUG", "lib_log_rich.force_color=true"))

    section = merged.as_dict()["lib_log_rich"]
    assert section == {"console_level": "DEBUG", "environment": "prod", "force_color": True}


@pytest.mark.os_agnostic
def test_apply_overrides_does_not_mutate_original() -> None:
    config = Config({"IntegrationConfiguration": {"ProviderConfiguration": []}}, {})

    apply_overrides(config, ('IntegrationConfiguration.ProviderConfiguration=[{"Name":"Contracting"}]',))

    assert _providers(config) == []


@pytest.mark.os_agnostic
def test_apply_overrides_rejects_malformed_input() -> None:
    config = Config({}, {})

    with pytest.raises(ValueError, match="Invalid override"):
        apply_overrides(config, ("no_equals_sign",))


@pytest.mark.os_agnostic
def test_apply_overrides_rejects_scalar_intermediate() -> None:
    """A dotted path cannot descend into a value set by an earlier override."""
    config = Config({}, {})

    with pytest.raises(TypeError, match="Expected dict"):
        apply_overrides(config, ("IntegrationConfiguration.Mode=plain", "IntegrationConfiguration.Mode.Sub=1"))


# ======================== properties ========================


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    assert isinstance(coerce_value(raw), (str, int, float, bool, list, dict, type(None)))


@pytest.mark.os_agnostic
@given(section=identifiers, key=identifiers, value=st.text(max_size=50))
@settings(max_examples=200)
def test_well_formed_overrides_always_parse(section: str, key: str, value: str) -> None:
    result = parse_override(f"{section}.{key}={value}")

    assert result.section == section
    assert result.key_path == (key,)
    assert result.value == coerce_value(value)


@pytest.mark.os_agnostic
@given(raw=st.text().filter(lambda s: "=" not in s))
@settings(max_examples=200)
def test_overrides_without_equals_are_rejected(raw: str) -> None:
    with pytest.raises(ValueError, match="must contain '='"):
        parse_override(raw)
