# =============================================================================
# core/schemas.py  —  Tool Argument Schemas (pydantic)
# =============================================================================
#
# One pydantic model per tool argument shape.  Each model does two jobs:
#   1. its JSON schema is what MCP clients see as the tool's input schema
#   2. model_validate() accepts or rejects a raw argument object, with
#      field-level error detail in pydantic.ValidationError
#
# WIRE NAMES:
#   Gong uses camelCase; Python attributes are snake_case.  The alias
#   generator maps one to the other, and dumps always use the aliases, so
#   what the caller sends is what Gong receives.
#
# THE "ABSENT" SENTINEL:
#   Optional fields are typed without Optional and default to None.  The
#   default is never validated, so None means "not supplied", while an
#   explicit JSON null fails validation like any other wrong type.  Dumps
#   use exclude_none, so an absent field never reaches the query string or
#   the body.  An empty string, 0 or False is a real value and is sent.
#
#   Only camelCase keys are accepted, the same names the schema advertises.
# =============================================================================

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StringConstraints,
    WithJsonSchema,
)
from pydantic.alias_generators import to_camel


_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
_DATE_TIME_PATTERN = (
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$"
)


def _check_calendar_date(value: str) -> str:
    # The pattern fixes the shape; this rejects 2024-02-30 and friends.
    try:
        datetime.fromisoformat(value[:19])
    except ValueError:
        raise ValueError("not a real calendar date-time") from None
    return value


_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# Kept as strings so the caller's exact text is forwarded unchanged.
DateTimeStr = Annotated[
    str,
    StringConstraints(pattern=_DATE_TIME_PATTERN),
    AfterValidator(_check_calendar_date),
    WithJsonSchema({"type": "string", "format": "date-time", "pattern": _DATE_TIME_PATTERN}),
]
DateStr = Annotated[str, StringConstraints(pattern=_DATE_PATTERN)]
EmailStr = Annotated[
    str,
    StringConstraints(pattern=_EMAIL_PATTERN),
    WithJsonSchema({"type": "string", "format": "email", "pattern": _EMAIL_PATTERN}),
]
Number = Union[StrictInt, StrictFloat]

CallDirection = Literal["Inbound", "Outbound", "Conference", "Unknown"]
CrmObjectType = Literal["ACCOUNT", "CONTACT", "DEAL", "LEAD"]
AggregationPeriod = Literal["DAY", "WEEK", "MONTH"]


class GongModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel)

    def to_wire(self) -> dict[str, Any]:
        """Dump with camelCase names, dropping every absent field."""
        return self.model_dump(by_alias=True, exclude_none=True)


# =============================================================================
# Calls
# =============================================================================

class GetCallsArguments(GongModel):
    """List calls that took place during a specified date range."""

    from_date_time: str
    to_date_time: str
    cursor: str
    workspace_id: str


class CallParty(GongModel):
    user_id: str = None
    email_address: str = None
    name: str = None
    title: str = None
    speaker_id: str = None


class AddCallArguments(GongModel):
    """A new call record to upload to Gong."""

    client_unique_id: str
    title: str
    actual_start: DateTimeStr
    duration: Number = Field(description="Call duration in seconds.")
    parties: list[CallParty]
    direction: CallDirection
    purpose: str = None
    scheduled_start: DateTimeStr = None
    scheduled_end: DateTimeStr = None
    disposition: str = None
    download_media_url: str = None
    language: str = None
    workspace_id: str = None


class IdArguments(GongModel):
    id: str


class AddCallMediaArguments(GongModel):
    id: str
    media_file: str = Field(description="Path of a local audio or video file to upload.")


class GetCallsExtensiveArguments(GongModel):
    from_date_time: DateTimeStr = None
    to_date_time: DateTimeStr = None
    cursor: str = None
    workspace_id: str = None


class TranscriptFilter(GongModel):
    from_date_time: DateTimeStr = None
    to_date_time: DateTimeStr = None
    call_ids: list[str] = None
    primary_user_ids: list[str] = None


class GetCallTranscriptsArguments(GongModel):
    filter: TranscriptFilter


# =============================================================================
# Users
# =============================================================================

class GetUsersArguments(GongModel):
    cursor: str = None
    include_avatars: StrictBool = None


class GetUserSettingsHistoryArguments(GongModel):
    id: str
    from_date_time: DateTimeStr = None
    to_date_time: DateTimeStr = None
    cursor: str = None


class UsersExtensiveFilter(GongModel):
    created_from_date_time: DateTimeStr = None
    created_to_date_time: DateTimeStr = None
    user_ids: list[str] = None


class GetUsersExtensiveArguments(GongModel):
    filter: UsersExtensiveFilter
    cursor: str = None


# =============================================================================
# Stats
# =============================================================================

class ActivityAggregateFilter(GongModel):
    from_date: DateStr
    to_date: DateStr
    user_ids: list[str] = None
    created_from_date_time: DateTimeStr = None
    created_to_date_time: DateTimeStr = None


class GetActivityAggregateArguments(GongModel):
    filter: ActivityAggregateFilter
    cursor: str = None


class ActivityByPeriodFilter(GongModel):
    from_date: DateStr
    to_date: DateStr
    user_ids: list[str] = None
    period: AggregationPeriod


class GetActivityAggregateByPeriodArguments(GongModel):
    filter: ActivityByPeriodFilter
    cursor: str = None


class DayByDayFilter(GongModel):
    from_date: DateStr = None
    to_date: DateStr = None
    user_ids: list[str] = None


class GetActivityDayByDayArguments(GongModel):
    filter: DayByDayFilter = None
    cursor: str = None


class GetActivityScorecardsArguments(GongModel):
    from_date: DateStr = None
    to_date: DateStr = None
    cursor: str = None
    user_ids: list[str] = None


class GetInteractionStatsArguments(GongModel):
    from_date: DateStr
    to_date: DateStr
    cursor: str = None
    user_ids: list[str] = None


# =============================================================================
# Settings, workspaces, library
# =============================================================================

class NoArguments(GongModel):
    pass


class CursorArguments(GongModel):
    cursor: str = None


class GetTrackersArguments(GongModel):
    cursor: str = None
    created_from_date_time: DateTimeStr = None
    created_to_date_time: DateTimeStr = None


class GetFolderContentArguments(GongModel):
    folder_id: str
    cursor: str = None
    from_date_time: DateTimeStr = None
    to_date_time: DateTimeStr = None


class GetLibraryFoldersArguments(GongModel):
    cursor: str = None
    workspace_id: str = None


# =============================================================================
# Data privacy
# =============================================================================

class EmailAddressLookupArguments(GongModel):
    email_address: EmailStr
    cursor: str = None


class PhoneNumberLookupArguments(GongModel):
    phone_number: str
    cursor: str = None


class EraseEmailAddressArguments(GongModel):
    email_address: EmailStr


class ErasePhoneNumberArguments(GongModel):
    phone_number: str


# =============================================================================
# CRM
# =============================================================================
# The nested request bodies use `fields` as a wire name; the Python attribute
# is renamed so it does not read like pydantic's own API.
# -----------------------------------------------------------------------------

class CrmEntityIds(GongModel):
    objects_crm_ids: list[str]


class GetCrmEntitiesArguments(GongModel):
    integration_id: StrictInt
    object_type: CrmObjectType
    request_body: CrmEntityIds


class CrmEntity(GongModel):
    object_type: CrmObjectType = None
    crm_id: str = None
    field_values: dict[str, Any] = Field(default=None, alias="fields")


class CrmEntitiesUpload(GongModel):
    objects: list[CrmEntity] = None


class UploadCrmEntitiesArguments(GongModel):
    integration_id: StrictInt
    request_body: CrmEntitiesUpload


class GetCrmEntitySchemaArguments(GongModel):
    integration_id: StrictInt
    object_type: CrmObjectType


class CrmSchemaField(GongModel):
    name: str = None
    type: str = None
    required: StrictBool = None


class CrmEntitySchema(GongModel):
    object_type: CrmObjectType = None
    schema_fields: list[CrmSchemaField] = Field(default=None, alias="fields")


class UploadCrmEntitySchemaArguments(GongModel):
    integration_id: StrictInt
    request_body: CrmEntitySchema


class RegisterCrmIntegrationArguments(GongModel):
    name: str
    crm_type: str
    description: str = None
