"""Declarative cross-field parameter rules.

A rule inspects the caller's parameter mapping and returns a violation message,
or ``None`` when the parameters satisfy it. Rules only look at values that are
present, except ``AnyOf`` which exists to demand one of several.

Every rule accepts an optional ``message`` that replaces its default wording,
for actions whose callers already match on a specific text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol


class ParamRule(Protocol):
    def check(self, params: Mapping[str, Any]) -> str | None: ...


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def is_present(params: Mapping[str, Any], name: str) -> bool:
    return not is_blank(params.get(name))


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


@dataclass(frozen=True)
class ValueRange:
    name: str
    minimum: float
    maximum: float
    unit: str = ""
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> str | None:
        value = params.get(self.name)
        if value is None:
            return None
        in_range = (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and self.minimum <= value <= self.maximum
        )
        if in_range:
            return None
        if self.message:
            return self.message
        suffix = f" {self.unit}" if self.unit else ""
        return (
            f'Parameter "{self.name}" must be between '
            f"{_format_number(self.minimum)} and {_format_number(self.maximum)}{suffix}"
        )


@dataclass(frozen=True)
class ListParam:
    name: str
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> str | None:
        value = params.get(self.name)
        if value is None or isinstance(value, (list, tuple)):
            return None
        return self.message or f'Parameter "{self.name}" must be an array'


@dataclass(frozen=True)
class MaxItems:
    """List param ``name`` may hold at most ``max_items`` entries."""

    name: str
    max_items: int
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> str | None:
        value = params.get(self.name)
        if not isinstance(value, (list, tuple)) or len(value) <= self.max_items:
            return None
        return self.message or f'Parameter "{self.name}" accepts at most {self.max_items} items'


@dataclass(frozen=True)
class NonBlankString:
    name: str
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> str | None:
        value = params.get(self.name)
        if value is None:
            return None
        if not isinstance(value, str) or not value.strip():
            return self.message or f"Invalid {self.name}: must be a non-empty string"
        return None


@dataclass(frozen=True)
class AnyOf:
    names: tuple[str, ...]
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> str | None:
        if any(is_present(params, name) for name in self.names):
            return None
        if self.message:
            return self.message
        quoted = [f'"{name}"' for name in self.names]
        return f"At least one of {' or '.join(quoted)} must be provided"


@dataclass(frozen=True)
class RequiredWith:
    """``name`` becomes required once ``when`` is supplied."""

    name: str
    when: str
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> str | None:
        if is_present(params, self.when) and not is_present(params, self.name):
            return (
                self.message
                or f'Parameter "{self.name}" is required when "{self.when}" is provided'
            )
        return None


@dataclass(frozen=True)
class RequiredKeys:
    """When ``name`` is an object, each of ``keys`` must be set inside it."""

    name: str
    keys: tuple[str, ...]

    def check(self, params: Mapping[str, Any]) -> str | None:
        value = params.get(self.name)
        if is_blank(value):
            return None
        if not isinstance(value, Mapping):
            return f'Parameter "{self.name}" must be an object'
        for key in self.keys:
            if is_blank(value.get(key)):
                return f"Missing required property in {self.name}: {key}"
        return None


def _contains(params: Mapping[str, Any], container: str, item: str) -> bool:
    value = params.get(container)
    if isinstance(value, (list, tuple)):
        return item in value
    return False


@dataclass(frozen=True)
class RequiredWhenContains:
    """``name`` is required when list param ``container`` includes ``item``."""

    name: str
    container: str
    item: str
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> str | None:
        if _contains(params, self.container, self.item) and not is_present(params, self.name):
            return self.message or (
                f'Parameter "{self.name}" is required when "{self.item}" '
                f'is included in "{self.container}"'
            )
        return None


@dataclass(frozen=True)
class ContainsWhenPresent:
    """List param ``container`` must include ``item`` once ``when`` is supplied."""

    container: str
    item: str
    when: str
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> str | None:
        if is_present(params, self.when) and not _contains(params, self.container, self.item):
            return self.message or (
                f'"{self.item}" must be included in "{self.container}" '
                f'when "{self.when}" is provided'
            )
        return None
