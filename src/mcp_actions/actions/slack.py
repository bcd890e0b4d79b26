"""Slack team-messaging actions."""

from __future__ import annotations

from mcp_actions.actions.base import ToolAction
from mcp_actions.tools.descriptor import ToolDescriptor
from mcp_actions.tools.rules import RequiredKeys, RequiredWith

TOOLKIT_ID = "688338e4ee9e1a9340d83b62"

ADD_REACTION_TO_AN_ITEM = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_ADD_REACTION_TO_AN_ITEM",
    description="Add an emoji reaction to a message.",
    required_params=("channel", "name", "timestamp"),
)

CREATE_A_REMINDER = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_CREATE_A_REMINDER",
    description="Create a one-off or recurring reminder.",
    required_params=("text", "time"),
    rules=(RequiredKeys("recurrence", ("frequency",)),),
)

FETCH_CONVERSATION_HISTORY = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_FETCH_CONVERSATION_HISTORY",
    description="Page through the message history of a conversation.",
    required_params=("channel",),
    defaults={"inclusive": False},
)

FETCH_MESSAGE_THREAD_FROM_A_CONVERSATION = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_FETCH_MESSAGE_THREAD_FROM_A_CONVERSATION",
    description="Fetch the replies of a message thread.",
)

INITIATES_CHANNEL_BASED_CONVERSATIONS = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_INITIATES_CHANNEL_BASED_CONVERSATIONS",
    description="Create a public or private channel.",
    required_params=("name",),
)

INVITE_USERS_TO_A_SLACK_CHANNEL = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_INVITE_USERS_TO_A_SLACK_CHANNEL",
    description="Invite a comma-separated list of users to a channel.",
    required_params=("channel", "users"),
)

JOIN_AN_EXISTING_CONVERSATION = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_JOIN_AN_EXISTING_CONVERSATION",
    description="Join an existing channel.",
)

LIST_ALL_SLACK_TEAM_CHANNELS_WITH_VARIOUS_FILTERS = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_LIST_ALL_SLACK_TEAM_CHANNELS_WITH_VARIOUS_FILTERS",
    description="List workspace channels filtered by name, type or archive state.",
    defaults={"exclude_archived": False, "limit": 1, "types": "public_channel"},
)

REMOVE_REACTION_FROM_ITEM = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_REMOVE_REACTION_FROM_ITEM",
    description="Remove an emoji reaction from a message, file or file comment.",
    required_params=("name",),
    rules=(
        RequiredWith("timestamp", when="channel"),
        RequiredWith("channel", when="timestamp"),
    ),
)

SCHEDULES_A_MESSAGE_TO_A_CHANNEL_AT_A_SPECIFIED_TIME = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_SCHEDULES_A_MESSAGE_TO_A_CHANNEL_AT_A_SPECIFIED_TIME",
    description="Schedule a message for delivery at a unix timestamp.",
    defaults={"parse": "none", "reply_broadcast": False, "unfurl_links": True, "unfurl_media": True},
)

SEARCH_FOR_MESSAGES_WITH_QUERY = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_SEARCH_FOR_MESSAGES_WITH_QUERY",
    description="Search workspace messages with Slack query syntax.",
    required_params=("query",),
)

SENDS_A_MESSAGE_TO_A_SLACK_CHANNEL = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_SENDS_A_MESSAGE_TO_A_SLACK_CHANNEL",
    description="Post a message to a channel, group or DM.",
    required_params=("channel",),
    defaults={
        "link_names": False,
        "mrkdwn": True,
        "parse": "none",
        "reply_broadcast": False,
        "unfurl_media": True,
    },
)

UPDATES_A_SLACK_MESSAGE = ToolDescriptor(
    toolkit_id=TOOLKIT_ID,
    action_name="SLACK_UPDATES_A_SLACK_MESSAGE",
    description="Edit a previously posted message.",
    required_params=("channel", "ts"),
)

DESCRIPTORS = (
    ADD_REACTION_TO_AN_ITEM,
    CREATE_A_REMINDER,
    FETCH_CONVERSATION_HISTORY,
    FETCH_MESSAGE_THREAD_FROM_A_CONVERSATION,
    INITIATES_CHANNEL_BASED_CONVERSATIONS,
    INVITE_USERS_TO_A_SLACK_CHANNEL,
    JOIN_AN_EXISTING_CONVERSATION,
    LIST_ALL_SLACK_TEAM_CHANNELS_WITH_VARIOUS_FILTERS,
    REMOVE_REACTION_FROM_ITEM,
    SCHEDULES_A_MESSAGE_TO_A_CHANNEL_AT_A_SPECIFIED_TIME,
    SEARCH_FOR_MESSAGES_WITH_QUERY,
    SENDS_A_MESSAGE_TO_A_SLACK_CHANNEL,
    UPDATES_A_SLACK_MESSAGE,
)

add_reaction_to_an_item = ToolAction.for_descriptor(ADD_REACTION_TO_AN_ITEM)
create_a_reminder = ToolAction.for_descriptor(CREATE_A_REMINDER)
fetch_conversation_history = ToolAction.for_descriptor(FETCH_CONVERSATION_HISTORY)
fetch_message_thread_from_a_conversation = ToolAction.for_descriptor(
    FETCH_MESSAGE_THREAD_FROM_A_CONVERSATION
)
initiates_channel_based_conversations = ToolAction.for_descriptor(
    INITIATES_CHANNEL_BASED_CONVERSATIONS
)
invite_users_to_a_slack_channel = ToolAction.for_descriptor(INVITE_USERS_TO_A_SLACK_CHANNEL)
join_an_existing_conversation = ToolAction.for_descriptor(JOIN_AN_EXISTING_CONVERSATION)
list_all_slack_team_channels_with_various_filters = ToolAction.for_descriptor(
    LIST_ALL_SLACK_TEAM_CHANNELS_WITH_VARIOUS_FILTERS
)
remove_reaction_from_item = ToolAction.for_descriptor(REMOVE_REACTION_FROM_ITEM)
schedules_a_message_to_a_channel_at_a_specified_time = ToolAction.for_descriptor(
    SCHEDULES_A_MESSAGE_TO_A_CHANNEL_AT_A_SPECIFIED_TIME
)
search_for_messages_with_query = ToolAction.for_descriptor(SEARCH_FOR_MESSAGES_WITH_QUERY)
sends_a_message_to_a_slack_channel = ToolAction.for_descriptor(SENDS_A_MESSAGE_TO_A_SLACK_CHANNEL)
updates_a_slack_message = ToolAction.for_descriptor(UPDATES_A_SLACK_MESSAGE)
