"""
Unit tests for cache key composition.
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import PurePosixPath
from uuid import UUID

import pytest

from keyed_cache.core.exceptions import KeySerializationError, RequiredFieldError
from keyed_cache.core.protocols import Stringable, has_custom_str
from keyed_cache.core.value_objects import DEFAULT_SEPARATOR, CacheKey, KeyKind


class Color(Enum):
    RED = "red"


class UserRef:
    """Key type with its own string form."""

    def __init__(self, user_id: int):
        self.user_id = user_id

    def __str__(self) -> str:
        return f"user-{self.user_id}"


@dataclass(frozen=True)
class TenantId:
    """Key type with a generated repr only."""

    value: int


class Opaque:
    pass


class TestKeyClassification:
    """Test how caller keys are normalized."""

    def test_string_used_verbatim(self):
        key = CacheKey.from_raw("usersession")
        assert key.kind == KeyKind.STRING
        assert key.value == "usersession"

    @pytest.mark.parametrize("raw, expected", [
        (42, "42"),
        (1.5, "1.5"),
        (True, "True"),
        (UUID("12345678-1234-5678-1234-567812345678"), "12345678-1234-5678-1234-567812345678"),
        (date(2024, 1, 2), "2024-01-02"),
        (PurePosixPath("a/b"), "a/b"),
        (Color.RED, str(Color.RED)),
    ])
    def test_stringable_keys(self, raw, expected):
        key = CacheKey.from_raw(raw)
        assert key.kind == KeyKind.STRINGABLE
        assert key.value == expected

    def test_custom_str_used(self):
        key = CacheKey.from_raw(UserRef(7))
        assert key.kind == KeyKind.STRINGABLE
        assert key.value == "user-7"

    def test_plain_objects_use_canonical_json(self):
        """Dict key order does not change the JSON form."""
        first = CacheKey.from_raw({"b": 2, "a": 1})
        second = CacheKey.from_raw({"a": 1, "b": 2})

        assert first.kind == KeyKind.JSON
        assert first.value == '{"a":1,"b":2}'
        assert first == second

    def test_sequences_use_json(self):
        assert CacheKey.from_raw([1, "x"]).value == '[1,"x"]'
        assert CacheKey.from_raw((1, "x")).value == '[1,"x"]'

    def test_json_fallback_warns(self, caplog):
        caplog.set_level(logging.WARNING, logger="keyed_cache")

        CacheKey.from_raw({"id": 1})

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Consider using a string" in warnings[0].getMessage()

    def test_json_fallback_warning_disabled(self, caplog):
        caplog.set_level(logging.WARNING, logger="keyed_cache")

        CacheKey.from_raw({"id": 1}, warn_on_json=False)

        assert not caplog.records

    def test_string_key_does_not_warn(self, caplog):
        caplog.set_level(logging.WARNING, logger="keyed_cache")

        CacheKey.from_raw("plain")
        CacheKey.from_raw(UserRef(1))

        assert not caplog.records

    @pytest.mark.parametrize("raw", [{1, 2}, Opaque(), {"when": Opaque()}])
    def test_unserializable_key(self, raw):
        with pytest.raises(KeySerializationError) as exc_info:
            CacheKey.from_raw(raw)

        assert exc_info.value.error_code == "CACHE_KEY_SERIALIZATION_ERROR"
        assert exc_info.value.original_error is not None

    def test_none_key_rejected(self):
        with pytest.raises(RequiredFieldError, match="Cache key cannot be null."):
            CacheKey.from_raw(None)

    def test_none_namespace_rejected(self):
        with pytest.raises(RequiredFieldError, match="Cache type cannot be null."):
            CacheKey.from_raw("k", namespace=None)


class TestComposite:
    """Test composite key generation."""

    def test_untyped_key(self):
        assert CacheKey.from_raw("k").composite() == "k"

    def test_typed_key(self):
        key = CacheKey.from_raw("k", namespace="anonymous")
        assert key.composite() == f"anonymous{DEFAULT_SEPARATOR}k"
        assert key.composite() == "anonymous$%$k"

    def test_custom_separator(self):
        key = CacheKey.from_raw(3, namespace="users")
        assert key.composite("::") == "users::3"

    def test_namespace_prefix(self):
        assert CacheKey.namespace_prefix("users") == "users$%$"
        assert CacheKey.namespace_prefix("users", "|") == "users|"

    def test_str(self):
        assert str(CacheKey.from_raw("k", namespace="t")) == "t.k"


def test_stringable_protocol():
    """Every object is structurally Stringable; custom forms are detected."""
    assert isinstance(UserRef(1), Stringable)
    assert has_custom_str(UserRef(1))
    assert has_custom_str(10)
    assert not has_custom_str(Opaque())
    assert not has_custom_str({"a": 1})
    assert not has_custom_str([1])
    assert has_custom_str(TenantId(1))
    assert not has_custom_str((1, 2))
    assert not has_custom_str({1, 2})


def test_repr_only_key_is_stringable():
    key = CacheKey.from_raw(TenantId(7), namespace="tenants")

    assert key.kind == KeyKind.STRINGABLE
    assert key.value == "TenantId(value=7)"
    assert key == CacheKey.from_raw(TenantId(7), namespace="tenants")


def test_key_type_exported():
    import keyed_cache
    from keyed_cache.core.value_objects.cache_key import KeyType

    assert keyed_cache.KeyType is KeyType
    assert "typing aid" in Stringable.__doc__.lower()
