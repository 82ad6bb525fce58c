# =============================================================================
# core/catalog.py  —  The Gong Endpoint Catalog
# =============================================================================
#
# Every tool the gateway exposes is one ToolDefinition below.  Adding an
# endpoint means adding a row here (plus its argument model in
# core/schemas.py); the dispatcher and the MCP server pick it up unchanged.
#
# NAMING:
#   Tool names match Gong's operation names (getCalls, addCall, ...) so a
#   model reading Gong's documentation finds the same words here.
# =============================================================================

from core.models import BodyStrategy, ToolDefinition
from core import schemas as s

GET, POST, PUT, DELETE = "GET", "POST", "PUT", "DELETE"


CALL_TOOLS = [
    ToolDefinition(
        name="getCalls",
        description="List calls that took place during a specified date range",
        method=GET,
        path="/v2/calls",
        arguments=s.GetCallsArguments,
        query=("fromDateTime", "toDateTime", "cursor", "workspaceId"),
    ),
    ToolDefinition(
        name="addCall",
        description="Upload a new call to Gong",
        method=POST,
        path="/v2/calls",
        arguments=s.AddCallArguments,
        body=BodyStrategy.FIELDS,
        body_fields=(
            "clientUniqueId", "title", "actualStart", "duration", "parties",
            "direction", "purpose", "scheduledStart", "scheduledEnd",
            "disposition", "downloadMediaUrl", "language", "workspaceId",
        ),
    ),
    ToolDefinition(
        name="getCallById",
        description="Retrieve data for a specific call by its ID",
        method=GET,
        path="/v2/calls/{id}",
        arguments=s.IdArguments,
    ),
    ToolDefinition(
        name="addCallMedia",
        description="Add media to an existing call",
        method=PUT,
        path="/v2/calls/{id}/media",
        arguments=s.AddCallMediaArguments,
        body=BodyStrategy.MULTIPART,
        file_field="mediaFile",
    ),
    ToolDefinition(
        name="getCallsExtensive",
        description="Retrieve detailed call data by various filters",
        method=GET,
        path="/v2/calls/extensive",
        arguments=s.GetCallsExtensiveArguments,
        query=("fromDateTime", "toDateTime", "cursor", "workspaceId"),
    ),
    ToolDefinition(
        name="getCallTranscripts",
        description="Retrieve the transcript of calls",
        method=POST,
        path="/v2/calls/transcript",
        arguments=s.GetCallTranscriptsArguments,
        body=BodyStrategy.FIELDS,
        body_fields=("filter",),
    ),
]


USER_TOOLS = [
    ToolDefinition(
        name="getUsers",
        description="Retrieve a list of all users in the company",
        method=GET,
        path="/v2/users",
        arguments=s.GetUsersArguments,
        query=("cursor", "includeAvatars"),
    ),
    ToolDefinition(
        name="getUserById",
        description="Retrieve a specific user by their ID",
        method=GET,
        path="/v2/users/{id}",
        arguments=s.IdArguments,
    ),
    ToolDefinition(
        name="getUserSettingsHistory",
        description="Retrieve the settings history for a specific user",
        method=GET,
        path="/v2/users/{id}/settings-history",
        arguments=s.GetUserSettingsHistoryArguments,
        query=("fromDateTime", "toDateTime", "cursor"),
    ),
    ToolDefinition(
        name="getUsersExtensive",
        description="Retrieve a list of users based on specified filters",
        method=POST,
        path="/v2/users/extensive",
        arguments=s.GetUsersExtensiveArguments,
        body=BodyStrategy.FIELDS,
        body_fields=("filter", "cursor"),
    ),
]


STATS_TOOLS = [
    ToolDefinition(
        name="getActivityAggregate",
        description="Retrieve aggregated activity for defined users by date",
        method=POST,
        path="/v2/stats/activity/aggregate",
        arguments=s.GetActivityAggregateArguments,
        body=BodyStrategy.FIELDS,
        body_fields=("filter", "cursor"),
    ),
    ToolDefinition(
        name="getActivityAggregateByPeriod",
        description=(
            "Retrieve aggregated activity for defined users by date range "
            "with grouping in time periods"
        ),
        method=POST,
        path="/v2/stats/activity/aggregate-by-period",
        arguments=s.GetActivityAggregateByPeriodArguments,
        body=BodyStrategy.ARGUMENTS,
    ),
    ToolDefinition(
        name="getActivityDayByDay",
        description="Retrieve daily activity for applicable users for a date range",
        method=POST,
        path="/v2/stats/activity/day-by-day",
        arguments=s.GetActivityDayByDayArguments,
        body=BodyStrategy.ARGUMENTS,
    ),
    ToolDefinition(
        name="getActivityScorecards",
        description=(
            "Retrieve answered scorecards for applicable reviewed users "
            "or scorecards for a date range"
        ),
        method=GET,
        path="/v2/stats/activity/scorecards",
        arguments=s.GetActivityScorecardsArguments,
        query=("fromDate", "toDate", "cursor", "userIds"),
    ),
    ToolDefinition(
        name="getInteractionStats",
        description="Retrieve interaction stats for applicable users by date",
        method=GET,
        path="/v2/stats/interaction",
        arguments=s.GetInteractionStatsArguments,
        query=("fromDate", "toDate", "cursor", "userIds"),
    ),
]


SETTINGS_TOOLS = [
    ToolDefinition(
        name="getScorecards",
        description="Retrieve all the scorecards within the Gong system",
        method=GET,
        path="/v2/settings/scorecards",
        arguments=s.NoArguments,
    ),
    ToolDefinition(
        name="getTrackers",
        description="Retrieve details for trackers",
        method=GET,
        path="/v2/settings/trackers",
        arguments=s.GetTrackersArguments,
        query=("cursor", "createdFromDateTime", "createdToDateTime"),
    ),
    ToolDefinition(
        name="getWorkspaces",
        description="Retrieve a list of all company workspaces",
        method=GET,
        path="/v2/workspaces",
        arguments=s.CursorArguments,
        query=("cursor",),
    ),
]


DATA_PRIVACY_TOOLS = [
    ToolDefinition(
        name="getDataForEmailAddress",
        description="Retrieve all references to an email address",
        method=GET,
        path="/v2/data-privacy/data-for-email-address",
        arguments=s.EmailAddressLookupArguments,
        query=("emailAddress", "cursor"),
    ),
    ToolDefinition(
        name="getDataForPhoneNumber",
        description="Retrieve all references to a phone number",
        method=GET,
        path="/v2/data-privacy/data-for-phone-number",
        arguments=s.PhoneNumberLookupArguments,
        query=("phoneNumber", "cursor"),
    ),
    ToolDefinition(
        name="eraseDataForEmailAddress",
        description="Delete the email address and all associated elements",
        method=DELETE,
        path="/v2/data-privacy/erase-data-for-email-address",
        arguments=s.EraseEmailAddressArguments,
        query=("emailAddress",),
    ),
    ToolDefinition(
        name="eraseDataForPhoneNumber",
        description="Delete the phone number and all associated elements",
        method=DELETE,
        path="/v2/data-privacy/erase-data-for-phone-number",
        arguments=s.ErasePhoneNumberArguments,
        query=("phoneNumber",),
    ),
]


LIBRARY_TOOLS = [
    ToolDefinition(
        name="getFolderContent",
        description="Retrieve a list of calls in a specific folder",
        method=GET,
        path="/v2/library/folder-content",
        arguments=s.GetFolderContentArguments,
        query=("folderId", "cursor", "fromDateTime", "toDateTime"),
    ),
    ToolDefinition(
        name="getLibraryFolders",
        description="Retrieve a list of library folders",
        method=GET,
        path="/v2/library/folders",
        arguments=s.GetLibraryFoldersArguments,
        query=("cursor", "workspaceId"),
    ),
]


CRM_TOOLS = [
    ToolDefinition(
        name="getCrmEntities",
        description="Retrieve CRM objects",
        method=POST,
        path="/v2/crm/entities",
        arguments=s.GetCrmEntitiesArguments,
        query=("integrationId", "objectType"),
        body=BodyStrategy.ARGUMENT,
        body_argument="requestBody",
    ),
    ToolDefinition(
        name="uploadCrmEntities",
        description="Upload CRM objects",
        method=POST,
        path="/v2/crm/entities",
        arguments=s.UploadCrmEntitiesArguments,
        query=("integrationId",),
        body=BodyStrategy.ARGUMENT,
        body_argument="requestBody",
    ),
    ToolDefinition(
        name="getCrmEntitySchema",
        description="Retrieve a list of schema fields",
        method=GET,
        path="/v2/crm/entity-schema",
        arguments=s.GetCrmEntitySchemaArguments,
        query=("integrationId", "objectType"),
    ),
    ToolDefinition(
        name="uploadCrmEntitySchema",
        description="Upload an object schema",
        method=POST,
        path="/v2/crm/entity-schema",
        arguments=s.UploadCrmEntitySchemaArguments,
        query=("integrationId",),
        body=BodyStrategy.ARGUMENT,
        body_argument="requestBody",
    ),
    ToolDefinition(
        name="getCrmIntegrations",
        description="Retrieve details for a generic CRM integration",
        method=GET,
        path="/v2/crm/integrations",
        arguments=s.CursorArguments,
        query=("cursor",),
    ),
    ToolDefinition(
        name="registerCrmIntegration",
        description="Register a new generic CRM integration",
        method=POST,
        path="/v2/crm/integrations",
        arguments=s.RegisterCrmIntegrationArguments,
        body=BodyStrategy.ARGUMENTS,
    ),
]


ALL_TOOLS = (
    CALL_TOOLS
    + USER_TOOLS
    + STATS_TOOLS
    + SETTINGS_TOOLS
    + DATA_PRIVACY_TOOLS
    + LIBRARY_TOOLS
    + CRM_TOOLS
)
