"""Configuration validation and default merging tests."""

from __future__ import annotations

import logging
from types import MappingProxyType

import pytest
from mitto.configuration import UNNAMED_PACKAGE, apply_defaults, validate_config
from mitto.errors import FormatError, MissingConfigError, MissingFieldError, TypeMismatchError
from mitto.schema_management import validate_schema


def _schema(**sections: dict):
    return validate_schema({"name": "x", **sections})


@pytest.mark.parametrize("config", [None, {}, {"port": "80"}, ["not", "a", "mapping"]])
def test_without_schema_config_is_returned_unchanged(config: object) -> None:
    assert validate_config(config, None) is config


def test_scenario_a_missing_config_with_required_fields() -> None:
    schema = _schema(required={"port": {"type": "number"}})

    with pytest.raises(MissingConfigError) as exc_info:
        validate_config(None, schema, consumer_name=lambda: "consumer-app")

    message = str(exc_info.value)
    assert "x" in message
    assert "consumer-app" in message


def test_missing_config_without_consumer_name_uses_placeholder() -> None:
    schema = _schema(required={"port": {"type": "number"}})

    with pytest.raises(MissingConfigError, match=UNNAMED_PACKAGE):
        validate_config(None, schema)


def test_scenario_b_missing_config_is_built_from_defaults() -> None:
    schema = _schema(optional={"port": {"type": "number", "default": 8080}})

    assert validate_config(None, schema) == {"port": 8080}


def test_missing_config_without_defaults_stays_absent() -> None:
    schema = _schema(optional={"port": {"type": "number"}})

    assert validate_config(None, schema) is None


def test_consumer_name_is_only_resolved_for_missing_config_errors() -> None:
    calls: list[str] = []

    def _consumer_name() -> str:
        calls.append("called")
        return "consumer-app"

    schema = _schema(
        required={"host": {"type": "string"}},
        optional={"port": {"type": "number", "default": 8080}},
    )

    validate_config({"host": "a.com"}, schema, consumer_name=_consumer_name)

    assert calls == []


def test_scenario_c_conforming_config_is_returned_unchanged() -> None:
    schema = _schema(required={"host": {"type": "string"}})
    config = {"host": "a.com"}

    result = validate_config(config, schema)

    assert result is config
    assert result == {"host": "a.com"}


def test_scenario_d_missing_required_field() -> None:
    schema = _schema(required={"host": {"type": "string"}})

    with pytest.raises(MissingFieldError, match="host"):
        validate_config({}, schema)


def test_scenario_e_required_field_with_wrong_kind() -> None:
    schema = _schema(required={"port": {"type": "number"}})

    with pytest.raises(TypeMismatchError) as exc_info:
        validate_config({"port": "80"}, schema)

    message = str(exc_info.value)
    assert "port" in message
    assert "type string" in message
    assert "type number" in message


def test_optional_field_with_wrong_kind_is_rejected() -> None:
    schema = _schema(optional={"debug": {"type": "boolean"}})

    with pytest.raises(TypeMismatchError, match="Optional property debug is type number"):
        validate_config({"debug": 1}, schema)


@pytest.mark.parametrize("value", [0, "", False, None])
def test_falsy_optional_values_are_still_type_checked(value: object) -> None:
    schema = _schema(optional={"retries": {"type": "object"}})

    with pytest.raises(TypeMismatchError):
        validate_config({"retries": value}, schema)


def test_absent_optional_fields_are_accepted() -> None:
    schema = _schema(optional={"debug": {"type": "boolean"}})

    assert validate_config({"other": 1}, schema) == {"other": 1}


def test_required_fields_are_checked_before_optional_fields() -> None:
    schema = _schema(
        required={"host": {"type": "string"}},
        optional={"debug": {"type": "boolean"}},
    )

    with pytest.raises(MissingFieldError):
        validate_config({"debug": "yes"}, schema)


def test_defaults_are_merged_into_supplied_config_in_place() -> None:
    schema = _schema(
        required={"host": {"type": "string"}},
        optional={"port": {"type": "number", "default": 8080}},
    )
    config = {"host": "a.com"}

    result = validate_config(config, schema)

    assert result is config
    assert config == {"host": "a.com", "port": 8080}


def test_defaults_overwrite_supplied_optional_values(caplog: pytest.LogCaptureFixture) -> None:
    schema = _schema(optional={"port": {"type": "number", "default": 8080}})

    with caplog.at_level(logging.WARNING, logger="mitto.configuration.config_validation"):
        result = validate_config({"port": 9090}, schema)

    assert result == {"port": 8080}
    assert "overwritten by its declared default" in caplog.text


def test_validation_is_idempotent_on_defaulted_config(caplog: pytest.LogCaptureFixture) -> None:
    schema = _schema(
        required={"host": {"type": "string"}},
        optional={"port": {"type": "number", "default": 8080}},
    )
    first = validate_config({"host": "a.com"}, schema)
    snapshot = dict(first)

    with caplog.at_level(logging.WARNING):
        second = validate_config(first, schema)

    assert second == snapshot
    assert caplog.records == []


def test_non_mapping_config_is_rejected_when_schema_applies() -> None:
    schema = _schema(required={"host": {"type": "string"}})

    with pytest.raises(FormatError):
        validate_config(["host"], schema)


def test_apply_defaults_copies_read_only_mappings() -> None:
    schema = _schema(optional={"port": {"type": "number", "default": 8080}})
    frozen = MappingProxyType({"host": "a.com"})

    result = apply_defaults(frozen, schema)

    assert result == {"host": "a.com", "port": 8080}
    assert dict(frozen) == {"host": "a.com"}


def test_apply_defaults_returns_same_mapping() -> None:
    schema = _schema(optional={"port": {"type": "number", "default": 8080}})
    config: dict[str, object] = {}

    assert apply_defaults(config, schema) is config
    assert config == {"port": 8080}


def test_nan_default_is_not_reported_as_overwritten_on_revalidation(
    caplog: pytest.LogCaptureFixture,
) -> None:
    schema = _schema(optional={"ratio": {"type": "number", "default": float("nan")}})
    first = validate_config({}, schema)

    with caplog.at_level(logging.WARNING, logger="mitto.configuration.config_validation"):
        second = validate_config(first, schema)

    assert second is first
    assert "overwritten by its declared default" not in caplog.text
