"""Action declarations grouped by toolkit."""

from mcp_actions.actions import firecrawl, googlesheets, slack
from mcp_actions.actions.base import ToolAction
from mcp_actions.tools.descriptor import ToolDescriptor

TOOLKITS = {
    "firecrawl": firecrawl.TOOLKIT_ID,
    "googlesheets": googlesheets.TOOLKIT_ID,
    "slack": slack.TOOLKIT_ID,
}


def all_descriptors() -> tuple[ToolDescriptor, ...]:
    return firecrawl.DESCRIPTORS + googlesheets.DESCRIPTORS + slack.DESCRIPTORS


__all__ = ["TOOLKITS", "ToolAction", "all_descriptors", "firecrawl", "googlesheets", "slack"]
