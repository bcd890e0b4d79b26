"""Read-only registry of tool descriptors keyed by ``(toolkit_id, action_name)``."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from mcp_actions.tools.descriptor import ToolDescriptor
from mcp_actions.tools.errors import UnknownToolError

RegistryKey = tuple[str, str]


class DescriptorRegistry(Mapping[RegistryKey, ToolDescriptor]):
    """Immutable once built; safe for unsynchronized concurrent reads."""

    def __init__(self, descriptors: Iterable[ToolDescriptor]) -> None:
        entries: dict[RegistryKey, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.key in entries:
                raise ValueError(
                    f"Duplicate tool descriptor: {descriptor.toolkit_id}/{descriptor.action_name}"
                )
            entries[descriptor.key] = descriptor
        self._entries: Mapping[RegistryKey, ToolDescriptor] = MappingProxyType(entries)

    def __getitem__(self, key: RegistryKey) -> ToolDescriptor:
        return self._entries[key]

    def __iter__(self) -> Iterator[RegistryKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def require(self, toolkit_id: str, action_name: str) -> ToolDescriptor:
        descriptor = self._entries.get((toolkit_id, action_name))
        if descriptor is None:
            raise UnknownToolError(toolkit_id, action_name)
        return descriptor

    def find_action(self, action_name: str) -> ToolDescriptor | None:
        """Look a descriptor up by action name alone (names are unique per toolkit)."""
        matches = [item for item in self._entries.values() if item.action_name == action_name]
        if len(matches) > 1:
            toolkits = ", ".join(sorted(item.toolkit_id for item in matches))
            raise ValueError(f"Action {action_name} is ambiguous across toolkits: {toolkits}")
        return matches[0] if matches else None

    def list_tools(self, toolkit_id: str | None = None) -> list[str]:
        return sorted(
            action_name
            for (key_toolkit, action_name) in self._entries
            if toolkit_id is None or key_toolkit == toolkit_id
        )

    def describe(self, toolkit_id: str | None = None) -> list[dict[str, Any]]:
        return [
            descriptor.summary()
            for descriptor in sorted(self._entries.values(), key=lambda item: item.key)
            if toolkit_id is None or descriptor.toolkit_id == toolkit_id
        ]


def build_registry() -> DescriptorRegistry:
    from mcp_actions.actions import all_descriptors

    return DescriptorRegistry(all_descriptors())


@lru_cache(maxsize=1)
def default_registry() -> DescriptorRegistry:
    return build_registry()


def list_tools() -> list[str]:
    return default_registry().list_tools()
