from string import Formatter

import pytest

from core.catalog import ALL_TOOLS
from core.dispatch import build_request
from core.models import BodyStrategy

TOOLS = {definition.name: definition for definition in ALL_TOOLS}

# name, arguments, method, path, query, body
CASES = [
    ("getCalls",
     {"fromDateTime": "2024-01-01T00:00:00Z", "toDateTime": "2024-02-01T00:00:00Z",
      "cursor": "c", "workspaceId": "w"},
     "GET", "/v2/calls",
     {"fromDateTime": "2024-01-01T00:00:00Z", "toDateTime": "2024-02-01T00:00:00Z",
      "cursor": "c", "workspaceId": "w"},
     None),
    ("getCallById", {"id": "123"}, "GET", "/v2/calls/123", {}, None),
    ("getCallsExtensive", {"workspaceId": "w"}, "GET", "/v2/calls/extensive",
     {"workspaceId": "w"}, None),
    ("getCallTranscripts",
     {"filter": {"fromDateTime": "2024-01-01T00:00:00Z", "primaryUserIds": ["u"]}},
     "POST", "/v2/calls/transcript", {},
     {"filter": {"fromDateTime": "2024-01-01T00:00:00Z", "primaryUserIds": ["u"]}}),
    ("getUsers", {"includeAvatars": True}, "GET", "/v2/users", {"includeAvatars": True}, None),
    ("getUserById", {"id": "u1"}, "GET", "/v2/users/u1", {}, None),
    ("getUserSettingsHistory", {"id": "u1", "cursor": "c"}, "GET",
     "/v2/users/u1/settings-history", {"cursor": "c"}, None),
    ("getUsersExtensive", {"filter": {"userIds": ["u1"]}}, "POST", "/v2/users/extensive",
     {}, {"filter": {"userIds": ["u1"]}}),
    ("getActivityAggregate",
     {"filter": {"fromDate": "2024-01-01", "toDate": "2024-01-31"}, "cursor": "c"},
     "POST", "/v2/stats/activity/aggregate", {},
     {"filter": {"fromDate": "2024-01-01", "toDate": "2024-01-31"}, "cursor": "c"}),
    ("getActivityAggregateByPeriod",
     {"filter": {"fromDate": "2024-01-01", "toDate": "2024-03-31", "period": "MONTH"}},
     "POST", "/v2/stats/activity/aggregate-by-period", {},
     {"filter": {"fromDate": "2024-01-01", "toDate": "2024-03-31", "period": "MONTH"}}),
    ("getActivityDayByDay", {"filter": {"userIds": ["u1"]}}, "POST",
     "/v2/stats/activity/day-by-day", {}, {"filter": {"userIds": ["u1"]}}),
    ("getActivityScorecards", {"fromDate": "2024-01-01"}, "GET",
     "/v2/stats/activity/scorecards", {"fromDate": "2024-01-01"}, None),
    ("getInteractionStats", {"fromDate": "2024-01-01", "toDate": "2024-01-31"}, "GET",
     "/v2/stats/interaction", {"fromDate": "2024-01-01", "toDate": "2024-01-31"}, None),
    ("getScorecards", {}, "GET", "/v2/settings/scorecards", {}, None),
    ("getTrackers", {"createdFromDateTime": "2024-01-01T00:00:00Z"}, "GET",
     "/v2/settings/trackers", {"createdFromDateTime": "2024-01-01T00:00:00Z"}, None),
    ("getWorkspaces", {}, "GET", "/v2/workspaces", {}, None),
    ("getDataForEmailAddress", {"emailAddress": "a@b.com"}, "GET",
     "/v2/data-privacy/data-for-email-address", {"emailAddress": "a@b.com"}, None),
    ("getDataForPhoneNumber", {"phoneNumber": "+15550100", "cursor": "c"}, "GET",
     "/v2/data-privacy/data-for-phone-number", {"phoneNumber": "+15550100", "cursor": "c"}, None),
    ("eraseDataForEmailAddress", {"emailAddress": "a@b.com"}, "DELETE",
     "/v2/data-privacy/erase-data-for-email-address", {"emailAddress": "a@b.com"}, None),
    ("eraseDataForPhoneNumber", {"phoneNumber": "+15550100"}, "DELETE",
     "/v2/data-privacy/erase-data-for-phone-number", {"phoneNumber": "+15550100"}, None),
    ("getFolderContent", {"folderId": "f1"}, "GET", "/v2/library/folder-content",
     {"folderId": "f1"}, None),
    ("getLibraryFolders", {"cursor": "c"}, "GET", "/v2/library/folders", {"cursor": "c"}, None),
    ("getCrmEntities",
     {"integrationId": 5, "objectType": "ACCOUNT", "requestBody": {"objectsCrmIds": ["x"]}},
     "POST", "/v2/crm/entities", {"integrationId": 5, "objectType": "ACCOUNT"},
     {"objectsCrmIds": ["x"]}),
    ("uploadCrmEntities",
     {"integrationId": 5,
      "requestBody": {"objects": [{"objectType": "LEAD", "crmId": "l1", "fields": {"score": 3}}]}},
     "POST", "/v2/crm/entities", {"integrationId": 5},
     {"objects": [{"objectType": "LEAD", "crmId": "l1", "fields": {"score": 3}}]}),
    ("getCrmEntitySchema", {"integrationId": 5, "objectType": "CONTACT"}, "GET",
     "/v2/crm/entity-schema", {"integrationId": 5, "objectType": "CONTACT"}, None),
    ("uploadCrmEntitySchema",
     {"integrationId": 5, "requestBody": {"fields": [{"name": "Tier", "type": "STRING"}]}},
     "POST", "/v2/crm/entity-schema", {"integrationId": 5},
     {"fields": [{"name": "Tier", "type": "STRING"}]}),
    ("getCrmIntegrations", {}, "GET", "/v2/crm/integrations", {}, None),
    ("registerCrmIntegration", {"name": "Acme CRM", "crmType": "generic"}, "POST",
     "/v2/crm/integrations", {}, {"name": "Acme CRM", "crmType": "generic"}),
]


@pytest.mark.parametrize("name, arguments, method, path, query, body", CASES)
def test_request_shape_matches_catalog(name, arguments, method, path, query, body):
    definition = TOOLS[name]

    request = build_request(definition, definition.arguments.model_validate(arguments))

    assert request.method == method
    assert request.path == path
    assert request.query == query
    assert request.body == body


def test_every_tool_has_a_request_shape_case():
    # addCall and addCallMedia are covered in test_dispatch.py.
    covered = {case[0] for case in CASES} | {"addCall", "addCallMedia"}
    assert covered == set(TOOLS)


def test_tool_names_are_unique():
    assert len(TOOLS) == len(ALL_TOOLS)


@pytest.mark.parametrize("definition", ALL_TOOLS, ids=lambda d: d.name)
def test_declared_fields_exist_in_argument_schema(definition):
    schema = definition.input_schema()
    properties = set(schema.get("properties", {}))
    required = set(schema.get("required", []))

    placeholders = {field for _, field, _, _ in Formatter().parse(definition.path) if field}
    assert placeholders <= required

    assert set(definition.query) <= properties
    assert set(definition.body_fields) <= properties
    if definition.body is BodyStrategy.ARGUMENT:
        assert definition.body_argument in required
    if definition.body is BodyStrategy.MULTIPART:
        assert definition.file_field in required


@pytest.mark.parametrize("definition", ALL_TOOLS, ids=lambda d: d.name)
def test_method_is_a_known_verb(definition):
    assert definition.method in {"GET", "POST", "PUT", "DELETE"}
