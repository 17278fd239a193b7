"""Domain Types — identity wrappers and immutable value objects."""

import dataclasses
from uuid import uuid4

import pytest

from onboarding.core.domain_types import (
    AutoAssignResult, EmployeeId, TaskDraft, TaskId, TemplateId, TemplateTaskId,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert EmployeeId(uid) == uid
    assert TaskId(uid) == uid
    assert TemplateId(uid) == uid
    assert TemplateTaskId(uid) == uid


def test_task_draft_defaults_incomplete():
    draft = TaskDraft("Badge photo", None, EmployeeId(uuid4()))
    assert draft.is_complete is False


def test_value_objects_are_frozen():
    result = AutoAssignResult("Engineering Onboarding", 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.tasks_created = 4
