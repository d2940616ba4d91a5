"""Unit tests for event document shaping, update merging and pagination."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from eventhub.schemas import EventCreate, EventUpdate, NudgeCreate
from eventhub.services.event_service import (
    build_event_document,
    event_service,
    merge_event_update,
)
from eventhub.services.nudge_service import build_nudge_document
from eventhub.utils.errors import EventNotFoundError

EXISTING = {
    "_id": "65f1c0ffee0000000000abcd",
    "type": "event",
    "uid": "user-1",
    "name": "Launch",
    "tagline": "Ship it",
    "schedule": "2024-05-01T10:00:00Z",
    "description": "Launch party",
    "files": ["a.png"],
    "moderator": "mod-1",
    "category": "tech",
    "sub_category": "web",
    "rigor_rank": 3,
    "attendees": ["user-2"],
    "nudge": {"tagged": True, "title": "Don't miss it"},
}


def test_build_event_document_fixes_type_attendees_and_nudge_defaults() -> None:
    document = build_event_document(EventCreate(uid="user-1", name="Launch", files=["a.png"]))

    assert document["type"] == "event"
    assert document["attendees"] == []
    assert document["nudge"] == {"tagged": False, "title": ""}
    assert document["uid"] == "user-1"
    assert document["files"] == ["a.png"]
    assert document["tagline"] is None


def test_build_event_document_maps_nudge_fields() -> None:
    payload = EventCreate.model_validate({"tagged": True, "nudgeTitle": "Hot"})
    assert build_event_document(payload)["nudge"] == {"tagged": True, "title": "Hot"}


@pytest.mark.parametrize("value", [[], {}, "0", True, 1])
def test_build_event_document_keeps_non_falsy_tagging(value) -> None:
    payload = EventCreate.model_validate({"tagged": value, "nudgeTitle": value})
    assert build_event_document(payload)["nudge"] == {"tagged": value, "title": value}


@pytest.mark.parametrize("value", [None, False, 0, 0.0, "", float("nan")])
def test_build_event_document_collapses_falsy_tagging(value) -> None:
    payload = EventCreate.model_validate({"tagged": value, "nudgeTitle": value})
    assert build_event_document(payload)["nudge"] == {"tagged": False, "title": ""}


def test_snake_case_keys_do_not_populate_aliased_fields() -> None:
    event = EventCreate.model_validate({"nudge_title": "Hot"})
    nudge = NudgeCreate.model_validate(
        {"cover_image": "c.png", "start_time": "10:00", "end_time": "12:00", "invitation_text": "hi"}
    )

    assert event.nudge_title is None
    assert (nudge.cover_image, nudge.start_time, nudge.end_time, nudge.invitation_text) == (
        None, None, None, None,
    )
    assert "nudge_title" not in EventUpdate.model_validate({"nudge_title": "Hot"}).model_fields_set


def test_create_body_ignores_unknown_fields() -> None:
    payload = EventCreate.model_validate({"name": "x", "attendees": ["intruder"], "type": "other"})
    document = build_event_document(payload)
    assert document["attendees"] == []
    assert document["type"] == "event"


def test_merge_with_only_name_preserves_everything_else() -> None:
    merged = merge_event_update(EXISTING, EventUpdate.model_validate({"name": "Relaunch"}))

    assert merged["name"] == "Relaunch"
    for field in ("files", "tagline", "schedule", "description", "moderator",
                  "category", "sub_category", "rigor_rank"):
        assert merged[field] == EXISTING[field]
    assert merged["nudge"] == EXISTING["nudge"]


def test_merge_writes_only_whitelisted_fields() -> None:
    merged = merge_event_update(EXISTING, EventUpdate())
    assert set(merged) == {
        "name", "files", "tagline", "schedule", "description", "moderator",
        "category", "sub_category", "rigor_rank", "nudge",
    }


def test_merge_applies_explicit_falsy_values() -> None:
    payload = EventUpdate.model_validate(
        {"tagged": False, "rigor_rank": 0, "description": "", "tagline": None}
    )
    merged = merge_event_update(EXISTING, payload)

    assert merged["nudge"] == {"tagged": False, "title": "Don't miss it"}
    assert merged["rigor_rank"] == 0
    assert merged["description"] == ""
    assert merged["tagline"] is None


def test_merge_updates_nudge_title_alone() -> None:
    merged = merge_event_update(EXISTING, EventUpdate.model_validate({"nudgeTitle": "New"}))
    assert merged["nudge"] == {"tagged": True, "title": "New"}


def test_merge_tolerates_event_without_nudge() -> None:
    legacy = {key: value for key, value in EXISTING.items() if key != "nudge"}
    merged = merge_event_update(legacy, EventUpdate.model_validate({"tagged": True}))
    assert merged["nudge"] == {"tagged": True, "title": None}


def test_build_nudge_document_nests_schedule() -> None:
    payload = NudgeCreate.model_validate(
        {
            "tag": "promo",
            "title": "Join us",
            "coverImage": "cover.png",
            "date": "2024-06-01",
            "startTime": "10:00",
            "endTime": "12:00",
            "description": "desc",
            "icon": "star",
            "invitationText": "Come along",
        }
    )

    assert build_nudge_document(payload) == {
        "tag": "promo",
        "title": "Join us",
        "coverImage": "cover.png",
        "schedule": {"date": "2024-06-01", "time": {"start": "10:00", "end": "12:00"}},
        "description": "desc",
        "icon": "star",
        "invitationText": "Come along",
    }


@pytest.fixture
def repository():
    with patch("eventhub.services.event_service.EventRepository") as repository_class:
        instance = MagicMock()
        instance.paginate = AsyncMock(return_value=[])
        instance.get_document = AsyncMock(return_value=None)
        instance.update = AsyncMock(return_value=True)
        instance.delete = AsyncMock(return_value=False)
        repository_class.return_value = instance
        yield instance


@pytest.mark.asyncio
async def test_paginate_computes_skip_from_page_and_limit(repository) -> None:
    await event_service.paginate_events(MagicMock(), ordering="latest", limit="5", page="2")
    repository.paginate.assert_awaited_once_with(limit=5, skip=5, latest_first=True)


@pytest.mark.asyncio
async def test_paginate_defaults_for_missing_or_invalid_values(repository) -> None:
    await event_service.paginate_events(MagicMock(), ordering="oldest", limit="abc", page=None)
    repository.paginate.assert_awaited_once_with(limit=10, skip=0, latest_first=False)


@pytest.mark.asyncio
async def test_update_missing_event_raises_without_writing(repository) -> None:
    with pytest.raises(EventNotFoundError):
        await event_service.update_event(MagicMock(), "65f1c0ffee0000000000abcd", EventUpdate())
    repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_that_changes_nothing_reports_not_found(repository) -> None:
    repository.get_document.return_value = dict(EXISTING)
    repository.update.return_value = False

    with pytest.raises(EventNotFoundError):
        await event_service.update_event(MagicMock(), EXISTING["_id"], EventUpdate())


@pytest.mark.asyncio
async def test_delete_missing_event_raises(repository) -> None:
    with pytest.raises(EventNotFoundError):
        await event_service.delete_event(MagicMock(), EXISTING["_id"])
