"""Facade binding for a single remote action."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mcp_actions.tools.descriptor import ToolDescriptor

if TYPE_CHECKING:
    from mcp_actions.tools.engine import ToolEngine


@dataclass(frozen=True)
class ToolAction:
    """Call-site for one action.

    The descriptor is looked up in the engine's registry on every call, so
    validation always follows the registered declaration.
    """

    toolkit_id: str
    action_name: str

    @classmethod
    def for_descriptor(cls, descriptor: ToolDescriptor) -> ToolAction:
        return cls(toolkit_id=descriptor.toolkit_id, action_name=descriptor.action_name)

    async def request(
        self,
        engine: ToolEngine,
        params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        if kwargs and (params is None or isinstance(params, Mapping)):
            params = {**(params or {}), **kwargs}
        return await engine.invoke(self.toolkit_id, self.action_name, params)
