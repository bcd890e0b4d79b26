"""Static per-action metadata used to validate calls before they are sent."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from mcp_actions.tools.rules import ParamRule


@dataclass(frozen=True, eq=False)
class ToolDescriptor:
    """Immutable description of one remote action.

    ``required_params`` keeps declaration order so the first missing parameter
    reported is stable. ``param_constraints`` maps a parameter to its allowed
    values; the order of those values is the order shown in error messages.
    The whole value must be one of them. ``item_constraints`` does the same for
    list-valued parameters, checking each item instead.
    ``defaults`` documents what the remote action assumes when a parameter is
    omitted. It is never merged into outgoing params.
    """

    toolkit_id: str
    action_name: str
    required_params: tuple[str, ...] = ()
    param_constraints: Mapping[str, tuple[Any, ...]] = field(default_factory=dict)
    item_constraints: Mapping[str, tuple[Any, ...]] = field(default_factory=dict)
    rules: tuple[ParamRule, ...] = ()
    defaults: Mapping[str, Any] = field(default_factory=dict)
    description: str = ""

    def __post_init__(self) -> None:
        if not self.toolkit_id or not self.action_name:
            raise ValueError("ToolDescriptor requires toolkit_id and action_name")
        object.__setattr__(self, "required_params", _ordered_unique(self.required_params))
        object.__setattr__(self, "param_constraints", _frozen_constraints(self.param_constraints))
        object.__setattr__(self, "item_constraints", _frozen_constraints(self.item_constraints))
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))

    @property
    def key(self) -> tuple[str, str]:
        return (self.toolkit_id, self.action_name)

    def summary(self) -> dict[str, Any]:
        return {
            "toolkit_id": self.toolkit_id,
            "action_name": self.action_name,
            "description": self.description,
            "required_params": list(self.required_params),
            "param_constraints": {
                name: list(allowed) for name, allowed in self.param_constraints.items()
            },
            "item_constraints": {
                name: list(allowed) for name, allowed in self.item_constraints.items()
            },
            "defaults": dict(self.defaults),
        }


@dataclass(frozen=True)
class InvocationRequest:
    descriptor: ToolDescriptor
    params: Mapping[str, Any]


def _frozen_constraints(
    constraints: Mapping[str, Iterable[Any]],
) -> Mapping[str, tuple[Any, ...]]:
    return MappingProxyType({name: tuple(allowed) for name, allowed in constraints.items()})


def _ordered_unique(names: Iterable[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for name in names:
        seen.setdefault(name, None)
    return tuple(seen)
