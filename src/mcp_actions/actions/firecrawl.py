"""Firecrawl web search, scrape and crawl actions."""

from __future__ import annotations

from mcp_actions.actions.base import ToolAction
from mcp_actions.tools.descriptor import ToolDescriptor
from mcp_actions.tools.rules import (
    AnyOf,
    ContainsWhenPresent,
    ListParam,
    MaxItems,
    RequiredWhenContains,
    ValueRange,
)

TOOLKIT_ID = "68f0a290f81ae7b79782adc9"

CRAWL_FORMATS = ("markdown", "html", "rawHtml", "links", "screenshot", "json")
SCRAPE_FORMATS = CRAWL_FORMATS + ("screenshot@fullPage",)

CANCEL_A_CRAWL_JOB = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="FIRECRAWL_CANCEL_A_CRAWL_JOB",
    description="Cancel an active crawl job by its UUID.",
    required_params=("id",),
)

CRAWL = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="FIRECRAWL_CRAWL",
    description="Start a crawl of a site and its linked pages.",
    required_params=("url",),
    item_constraints={"scrapeOptions_formats": CRAWL_FORMATS},
    rules=(
        ListParam("scrapeOptions_formats"),
        RequiredWhenContains(
            "scrapeOptions_jsonOptions",
            "scrapeOptions_formats",
            "json",
            message=(
                'scrapeOptions_jsonOptions is required when "json" format '
                "is specified in scrapeOptions_formats"
            ),
        ),
        ContainsWhenPresent(
            "scrapeOptions_formats",
            "json",
            "scrapeOptions_jsonOptions",
            message=(
                '"json" must be included in scrapeOptions_formats '
                "when scrapeOptions_jsonOptions is provided"
            ),
        ),
    ),
    defaults={
        "limit": 10,
        "scrapeOptions_formats": ["markdown"],
        "scrapeOptions_onlyMainContent": True,
        "scrapeOptions_timeout": 30000,
    },
)

EXTRACT = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="FIRECRAWL_EXTRACT",
    description="Extract structured data from one or more URLs with a prompt or schema.",
    required_params=("urls",),
    rules=(
        ListParam("urls"),
        MaxItems("urls", 10, message="Maximum 10 URLs allowed (beta limitation)"),
        AnyOf(("prompt", "schema")),
    ),
    defaults={"enable_web_search": False},
)

GET_THE_STATUS_OF_A_CRAWL_JOB = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="FIRECRAWL_GET_THE_STATUS_OF_A_CRAWL_JOB",
    description="Fetch progress and results of a crawl job.",
    required_params=("id",),
)

MAP_MULTIPLE_URLS_BASED_ON_OPTIONS = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="FIRECRAWL_MAP_MULTIPLE_URLS_BASED_ON_OPTIONS",
    description="List the URLs reachable from a base URL.",
    required_params=("url",),
    rules=(ValueRange("limit", 1, 100000),),
    defaults={"ignoreQueryParameters": True, "includeSubdomains": True, "limit": 5000},
)

SCRAPE = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="FIRECRAWL_SCRAPE",
    description="Scrape a single page into the requested formats.",
    required_params=("url",),
    item_constraints={"formats": SCRAPE_FORMATS},
    rules=(ListParam("formats"),),
    defaults={"formats": ["markdown"], "onlyMainContent": True, "waitFor": 0, "timeout": 30000},
)

SEARCH = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="FIRECRAWL_SEARCH",
    description="Run a web search and optionally scrape the results.",
    required_params=("q",),
    rules=(
        ValueRange("limit", 1, 100),
        ValueRange("timeout", 1000, 300000, unit="milliseconds"),
    ),
    defaults={"country": "us", "lang": "en", "limit": 5, "timeout": 60000},
)

DESCRIPTORS = (
    CANCEL_A_CRAWL_JOB,
    CRAWL,
    EXTRACT,
    GET_THE_STATUS_OF_A_CRAWL_JOB,
    MAP_MULTIPLE_URLS_BASED_ON_OPTIONS,
    SCRAPE,
    SEARCH,
)

cancel_a_crawl_job = ToolAction.for_descriptor(CANCEL_A_CRAWL_JOB)
crawl = ToolAction.for_descriptor(CRAWL)
extract = ToolAction.for_descriptor(EXTRACT)
get_the_status_of_a_crawl_job = ToolAction.for_descriptor(GET_THE_STATUS_OF_A_CRAWL_JOB)
map_multiple_urls_based_on_options = ToolAction.for_descriptor(MAP_MULTIPLE_URLS_BASED_ON_OPTIONS)
scrape = ToolAction.for_descriptor(SCRAPE)
search = ToolAction.for_descriptor(SEARCH)
