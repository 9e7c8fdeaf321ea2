"""Tests for the upload/remove orchestration."""

import pytest

from core.domain.models import RemoteMaterial
from core.errors import MissingCredential, RemoteRejected, RemoveFailed, UploadFailed
from core.services.session import SessionManager
from core.services.sync_pipeline import SyncHooks, SyncOrchestrator, prepare_lessons

INPUT = (
    "Intro\thttps://youtu.be/intro\n"
    "Loops\thttps://drive.example.com/loops\n"
    "Functions\thttps://youtu.be/functions\n"
    "\n"
    "Teamwork\thttps://youtu.be/teamwork\n"
)


def _orchestrator(fake_lms, store, *, quiet=False, hooks=None):
    return SyncOrchestrator(
        api=fake_lms,
        session=SessionManager(fake_lms, store),
        module_id=17063573,
        quiet=quiet,
        hooks=hooks,
    )


def test_prepare_lessons_runs_full_naming_pipeline():
    lessons = prepare_lessons("Intro\ta\nIntro\tb\n\nIntro\tc")

    assert [lesson.name for lesson in lessons] == [
        "Tech skills Intro",
        "Tech skills Intro (2)",
        "Soft skills Intro",
    ]


def test_upload_creates_lessons_in_order(fake_lms, memory_store):
    uploaded = []
    result = _orchestrator(
        fake_lms, memory_store, hooks=SyncHooks(uploaded=uploaded.append)
    ).upload(42, INPUT)

    creates = [call for call in fake_lms.calls if call[0] == "create"]
    assert creates == [
        ("create", "Tech skills Intro", "video", 42, "access-1"),
        ("create", "Tech skills Loops", "other", 42, "access-1"),
        ("create", "Tech skills Functions", "video", 42, "access-1"),
        ("create", "Soft skills Teamwork", "video", 42, "access-1"),
    ]
    assert fake_lms.calls[0] == ("refresh", "refresh-0")
    assert [lesson.name for lesson in result.uploaded] == [call[1] for call in creates]
    assert uploaded == result.uploaded


def test_upload_stops_at_first_rejection(fake_lms, memory_store):
    fake_lms.create_errors["Tech skills Loops"] = "Name is taken"

    with pytest.raises(UploadFailed) as excinfo:
        _orchestrator(fake_lms, memory_store).upload(42, INPUT)

    assert fake_lms.names("create") == ["Tech skills Intro", "Tech skills Loops"]
    assert excinfo.value.name == "Tech skills Loops"
    assert excinfo.value.message == "Name is taken"
    assert 'When uploading lesson "Tech skills Loops"' in str(excinfo.value)


def test_quiet_suppresses_hooks(fake_lms, memory_store):
    uploaded = []
    _orchestrator(
        fake_lms, memory_store, quiet=True, hooks=SyncHooks(uploaded=uploaded.append)
    ).upload(42, INPUT)

    assert uploaded == []
    assert len(fake_lms.names("create")) == 4


def test_upload_without_token_makes_no_calls(fake_lms, memory_store):
    memory_store.token = None

    with pytest.raises(MissingCredential):
        _orchestrator(fake_lms, memory_store).upload(42, INPUT)
    assert fake_lms.calls == []


def test_refresh_rejection_aborts_before_upload(fake_lms, memory_store):
    fake_lms.refresh_error = "Session expired"

    with pytest.raises(RemoteRejected, match="Session expired"):
        _orchestrator(fake_lms, memory_store).upload(42, INPUT)
    assert fake_lms.names("create") == []


def test_remove_deletes_every_listed_material(fake_lms, memory_store):
    fake_lms.materials = [
        RemoteMaterial(id=1, name="Tech skills Intro"),
        RemoteMaterial(id=2, name="Soft skills Teamwork"),
    ]
    removed = []

    result = _orchestrator(
        fake_lms, memory_store, hooks=SyncHooks(removed=removed.append)
    ).remove(42)

    assert ("list", 17063573, 42, "access-1") in fake_lms.calls
    assert fake_lms.names("delete") == [1, 2]
    assert [material.id for material in result.removed] == [1, 2]
    assert removed == result.removed


def test_remove_stops_at_first_rejection(fake_lms, memory_store):
    fake_lms.materials = [
        RemoteMaterial(id=1, name="A"),
        RemoteMaterial(id=2, name="B"),
        RemoteMaterial(id=3, name="C"),
    ]
    fake_lms.delete_errors[2] = "Forbidden"

    with pytest.raises(RemoveFailed) as excinfo:
        _orchestrator(fake_lms, memory_store).remove(42)

    assert fake_lms.names("delete") == [1, 2]
    assert excinfo.value.name == "B"
    assert 'When removing lesson "B" GoITeens LMS returned an error: Forbidden' == str(excinfo.value)


def test_remove_with_no_materials_is_a_noop(fake_lms, memory_store):
    result = _orchestrator(fake_lms, memory_store).remove(42)

    assert result.removed == []
    assert fake_lms.names("delete") == []
