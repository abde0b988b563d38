# File: tests/test_validation.py
import pytest

from vsixpack.errors import ValidationError
from vsixpack.manifest.model import parse_manifest
from vsixpack.manifest.validation import (
    validate_extension_name,
    validate_manifest,
    validate_publisher,
    validate_version,
)


@pytest.mark.parametrize("validator", [validate_publisher, validate_extension_name])
@pytest.mark.parametrize("value", [None, ""])
def test_identifier_rejects_empty(validator, value):
    with pytest.raises(ValidationError):
        validator(value)


@pytest.mark.parametrize("validator", [validate_publisher, validate_extension_name])
def test_identifier_accepts_valid(validator):
    for value in ("hello", "Hello", "HelloWorld", "Hello-World", "Hell0-World"):
        assert validator(value) == value


@pytest.mark.parametrize("validator", [validate_publisher, validate_extension_name])
@pytest.mark.parametrize("value", ["hello.", ".hello", "h ello", "hello world", "-hello", "hello-", "-"])
def test_identifier_rejects_malformed(validator, value):
    with pytest.raises(ValidationError):
        validator(value)


def test_publisher_error_names_field():
    with pytest.raises(ValidationError, match="publisher"):
        validate_publisher("bad name")


def test_version_accepts_valid():
    for value in ("1.0.0", "0.1.1", "0.1.1-pre", "10.20.30-rc.1"):
        assert validate_version(value) == value


@pytest.mark.parametrize("value", [None, "", ".", "..", "0", "0.1", ".0.1", "0.1.", "0.0.0.1", "0.1.1-", "a.b.c"])
def test_version_rejects_malformed(value):
    with pytest.raises(ValidationError):
        validate_version(value)


def _manifest(**overrides):
    data = {"publisher": "demo", "name": "demo", "version": "1.0.0", "engines": {"vscode": "0.10.1"}}
    data.update(overrides)
    return parse_manifest(data)


def test_validate_manifest_accepts_complete_manifest():
    m = _manifest()
    assert validate_manifest(m) is m


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"publisher": None}, "publisher"),
        ({"name": None}, "extension"),
        ({"version": None}, "version"),
        ({"version": "1.0"}, "version"),
        ({"engines": None}, "engines"),
        ({"engines": {"vscode": None}}, "engines.vscode"),
    ],
)
def test_validate_manifest_rejects_missing_fields(overrides, field):
    with pytest.raises(ValidationError, match=field):
        validate_manifest(_manifest(**overrides))
