"""Tests for request schema behaviour: casing, partial updates and trimming."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.fieldops.core.exceptions import ValidationFailed
from src.fieldops.schemas.customer import CustomerUpdate
from src.fieldops.schemas.job import JobCreate, JobUpdate
from src.fieldops.schemas.job_status import JobStatusCreate, JobStatusReorder
from src.fieldops.schemas.task import TaskComplete, TaskCreate, TaskUpdate

pytestmark = pytest.mark.unit


class TestPartialUpdate:
    def test_absent_keys_are_not_changes(self):
        update = JobUpdate.model_validate({"title": "New title"})
        assert update.changes() == {"title": "New title"}

    def test_explicit_null_clears_nullable_field(self):
        update = JobUpdate.model_validate({"assignedWorkerId": None, "description": None})
        assert update.changes() == {"assigned_worker_id": None, "description": None}

    @pytest.mark.parametrize("field", ["title", "statusId", "customerId"])
    def test_explicit_null_on_required_field_is_rejected(self, field):
        with pytest.raises(ValidationError, match="cannot be null"):
            JobUpdate.model_validate({field: None})

    def test_unknown_keys_are_rejected(self):
        with pytest.raises(ValidationError):
            JobUpdate.model_validate({"isArchived": True})
        with pytest.raises(ValidationError):
            TaskUpdate.model_validate({"is_completed": True})

    def test_nullable_fields_are_per_schema(self):
        assert CustomerUpdate.model_validate({"phone": None}).changes() == {"phone": None}
        with pytest.raises(ValidationError):
            CustomerUpdate.model_validate({"name": None})

    def test_blank_description_becomes_null(self):
        update = TaskUpdate.model_validate({"description": "   "})
        assert update.changes() == {"description": None}

    def test_payload_fields_accept_either_casing(self):
        payload = {"statusId": "x", "title": "y", "isArchived": True}
        assert JobUpdate.payload_fields(payload) == {"status_id", "title", "is_archived"}

    def test_from_payload_raises_domain_validation_error(self):
        with pytest.raises(ValidationFailed) as exc_info:
            JobUpdate.from_payload({"scheduledDate": "not a date"})
        assert [e["field"] for e in exc_info.value.errors] == ["scheduledDate"]


class TestCasing:
    def test_camel_and_snake_are_both_accepted(self):
        customer_id, status_id = uuid4(), uuid4()
        camel = JobCreate.model_validate(
            {"customerId": str(customer_id), "statusId": str(status_id), "title": "A"}
        )
        snake = JobCreate.model_validate(
            {"customer_id": str(customer_id), "status_id": str(status_id), "title": "A"}
        )
        assert camel == snake

    def test_reorder_accepts_camel_case(self):
        ids = [uuid4(), uuid4()]
        reorder = JobStatusReorder.model_validate({"statusIds": [str(i) for i in ids]})
        assert reorder.status_ids == ids


class TestTrimming:
    def test_title_is_trimmed(self):
        assert TaskCreate.model_validate({"title": "  Fix pump  "}).title == "Fix pump"

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_is_rejected(self, title):
        with pytest.raises(ValidationError):
            TaskCreate.model_validate({"title": title})

    def test_title_length_is_bounded(self):
        with pytest.raises(ValidationError):
            TaskCreate.model_validate({"title": "x" * 256})


class TestJobStatusColor:
    @pytest.mark.parametrize("color", ["#6366f1", "#ABCDEF", "#000000"])
    def test_hex_colors(self, color):
        assert JobStatusCreate.model_validate({"name": "A", "color": color}).color == color

    def test_color_is_optional(self):
        assert JobStatusCreate.model_validate({"name": "A"}).color is None

    @pytest.mark.parametrize("color", ["#fff", "blue", "#1234567", "123456"])
    def test_rejects_other_formats(self, color):
        with pytest.raises(ValidationError):
            JobStatusCreate.model_validate({"name": "A", "color": color})


def test_task_complete_defaults_to_true():
    assert TaskComplete.model_validate({}).complete is True
    assert TaskComplete.model_validate({"complete": False}).complete is False
