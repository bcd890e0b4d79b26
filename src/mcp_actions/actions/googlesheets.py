"""Google Sheets spreadsheet actions."""

from __future__ import annotations

from mcp_actions.actions.base import ToolAction
from mcp_actions.tools.descriptor import ToolDescriptor
from mcp_actions.tools.rules import ListParam, NonBlankString, ValueRange

TOOLKIT_ID = "686de48c6fd1cae1afbb55ba"

AGGREGATE_OPERATIONS = ("sum", "average", "count", "min", "max", "percentage")

AGGREGATE_COLUMN_DATA = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="GOOGLESHEETS_AGGREGATE_COLUMN_DATA",
    description="Aggregate a column, optionally filtered by a search column value.",
    required_params=("spreadsheet_id", "sheet_name", "target_column", "operation"),
    param_constraints={"operation": AGGREGATE_OPERATIONS},
    defaults={"has_header_row": True, "case_sensitive": True},
)

BATCH_GET = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="GOOGLESHEETS_BATCH_GET",
    description="Read one or more ranges from a spreadsheet.",
    required_params=("spreadsheet_id",),
    param_constraints={
        "valueRenderOption": ("FORMATTED_VALUE", "UNFORMATTED_VALUE", "FORMULA"),
        "dateTimeRenderOption": ("SERIAL_NUMBER", "FORMATTED_STRING"),
    },
    rules=(ListParam("ranges"),),
    defaults={
        "valueRenderOption": "FORMATTED_VALUE",
        "dateTimeRenderOption": "SERIAL_NUMBER",
        "empty_strings_filtered": False,
    },
)

BATCH_UPDATE = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="GOOGLESHEETS_BATCH_UPDATE",
    description="Write a 2D array of values into a sheet.",
    required_params=("spreadsheet_id", "sheet_name", "values"),
    param_constraints={"valueInputOption": ("RAW", "USER_ENTERED")},
    rules=(ListParam("values"),),
)

CREATE_GOOGLE_SHEET1 = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="GOOGLESHEETS_CREATE_GOOGLE_SHEET1",
    description="Create a new spreadsheet, optionally titled.",
)

GET_SHEET_NAMES = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="GOOGLESHEETS_GET_SHEET_NAMES",
    description="List the sheet (tab) names of a spreadsheet.",
    required_params=("spreadsheet_id",),
    rules=(NonBlankString("spreadsheet_id"),),
)

GET_SPREADSHEET_INFO = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="GOOGLESHEETS_GET_SPREADSHEET_INFO",
    description="Fetch spreadsheet metadata and sheet properties.",
    required_params=("spreadsheet_id",),
    rules=(
        NonBlankString(
            "spreadsheet_id",
            message="Parameter spreadsheet_id must be a non-empty string",
        ),
    ),
)

LOOKUP_SPREADSHEET_ROW = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="GOOGLESHEETS_LOOKUP_SPREADSHEET_ROW",
    description="Find the first row containing a value.",
    required_params=("spreadsheet_id", "query"),
    defaults={"case_sensitive": False, "normalize_whitespace": True},
)

SEARCH_SPREADSHEETS = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="GOOGLESHEETS_SEARCH_SPREADSHEETS",
    description="Search Drive for spreadsheets by name, content or date.",
    param_constraints={"search_type": ("name", "content", "both")},
    rules=(
        ValueRange(
            "max_results",
            1,
            1000,
            message="Parameter max_results must be between 1 and 1000",
        ),
    ),
    defaults={
        "include_shared_drives": True,
        "include_trashed": False,
        "max_results": 10,
        "order_by": "modifiedTime desc",
        "search_type": "name",
        "shared_with_me": False,
        "starred_only": False,
    },
)

SHEET_FROM_JSON = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="GOOGLESHEETS_SHEET_FROM_JSON",
    description="Create a spreadsheet from a list of row objects.",
    required_params=("title", "sheet_name", "sheet_json"),
    rules=(ListParam("sheet_json", message="Parameter sheet_json must be an array"),),
)

DESCRIPTORS = (
    AGGREGATE_COLUMN_DATA,
    BATCH_GET,
    BATCH_UPDATE,
    CREATE_GOOGLE_SHEET1,
    GET_SHEET_NAMES,
    GET_SPREADSHEET_INFO,
    LOOKUP_SPREADSHEET_ROW,
    SEARCH_SPREADSHEETS,
    SHEET_FROM_JSON,
)

aggregate_column_data = ToolAction.for_descriptor(AGGREGATE_COLUMN_DATA)
batch_get = ToolAction.for_descriptor(BATCH_GET)
batch_update = ToolAction.for_descriptor(BATCH_UPDATE)
create_google_sheet1 = ToolAction.for_descriptor(CREATE_GOOGLE_SHEET1)
get_sheet_names = ToolAction.for_descriptor(GET_SHEET_NAMES)
get_spreadsheet_info = ToolAction.for_descriptor(GET_SPREADSHEET_INFO)
lookup_spreadsheet_row = ToolAction.for_descriptor(LOOKUP_SPREADSHEET_ROW)
search_spreadsheets = ToolAction.for_descriptor(SEARCH_SPREADSHEETS)
sheet_from_json = ToolAction.for_descriptor(SHEET_FROM_JSON)
