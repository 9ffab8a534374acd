"""Unit tests for the flat-file JSON store and its repositories."""

import gc

import pytest

from learning_patterns.core.errors import StorageError, ValidationError, get_status_code
from learning_patterns.persistence.assessment_repository import (
    AssessmentRepository,
    ProfileRepository,
    timestamp_sort_key,
)
from learning_patterns.persistence.cognitive_repository import CognitiveRepository
from learning_patterns.persistence.json_store import JsonFileStore, validate_identifier


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(tmp_path / "documents")


@pytest.mark.asyncio
async def test_write_then_read(store):
    await store.write("profile_alice", {"userId": "alice", "assessmentCount": 2})

    assert await store.read("profile_alice") == {"userId": "alice", "assessmentCount": 2}
    assert store.path_for("profile_alice").is_file()
    assert not list(store.root.glob("*.tmp"))


@pytest.mark.asyncio
async def test_missing_document_reads_none(store):
    assert await store.read("assessment_missing") is None
    assert await store.list_names("assessment_") == []


@pytest.mark.asyncio
async def test_list_names_filters_by_prefix(store):
    await store.write("assessment_b", {})
    await store.write("assessment_a", {})
    await store.write("profile_a", {})

    assert await store.list_names("assessment_") == ["assessment_a", "assessment_b"]


@pytest.mark.asyncio
async def test_corrupt_document_raises_storage_error(store):
    store.root.mkdir(parents=True)
    store.path_for("profile_broken").write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageError) as exc_info:
        await store.read("profile_broken")

    assert get_status_code(exc_info.value) == 503
    assert exc_info.value.path.endswith("profile_broken.json")


@pytest.mark.asyncio
async def test_is_writable_creates_root(store):
    assert await store.is_writable() is True
    assert store.root.is_dir()


def test_same_lock_per_document(store):
    assert store.lock("profile_a") is store.lock("profile_a")
    assert store.lock("profile_a") is not store.lock("profile_b")


@pytest.mark.asyncio
async def test_lock_released_when_unreferenced(store):
    lock = store.lock("profile_a")
    async with lock:
        assert store.lock("profile_a") is lock
    del lock
    gc.collect()

    assert "profile_a" not in store._locks


@pytest.mark.asyncio
async def test_delete_removes_document(store):
    await store.write("assessment_a1", {"id": "a1"})
    await store.delete("assessment_a1")
    await store.delete("assessment_a1")

    assert await store.read("assessment_a1") is None


@pytest.mark.parametrize("value", ["user-1", "abc_DEF", "a" * 128])
def test_validate_identifier_accepts(value):
    assert validate_identifier(value) == value


@pytest.mark.parametrize("value", ["", "../etc/passwd", "has space", "a" * 129, "x.json"])
def test_validate_identifier_rejects(value):
    with pytest.raises(ValidationError) as exc_info:
        validate_identifier(value, "userId")
    assert exc_info.value.message == "Invalid userId"


def test_timestamp_sort_key_handles_bad_values():
    earliest = timestamp_sort_key({"timestamp": "yesterday"})
    assert earliest == timestamp_sort_key({})
    assert timestamp_sort_key({"timestamp": "2026-01-01T00:00:00.000Z"}) > earliest


def test_timestamp_sort_key_normalises_offsets():
    five_am_utc = timestamp_sort_key({"timestamp": "2024-01-01T10:00:00+05:00"})
    six_am_utc = timestamp_sort_key({"timestamp": "2024-01-01T06:00:00Z"})

    assert five_am_utc < six_am_utc
    assert five_am_utc == timestamp_sort_key({"timestamp": "2024-01-01T05:00:00Z"})
    assert timestamp_sort_key({"timestamp": "0001-01-01T00:00:00+05:00"}) == timestamp_sort_key({})


@pytest.mark.asyncio
async def test_assessments_listed_newest_first(store):
    repo = AssessmentRepository(store)
    await repo.create({"id": "a1", "userId": "alice", "timestamp": "2026-01-01T10:00:00.000Z"})
    await repo.create({"id": "a2", "userId": "alice", "timestamp": "2026-02-01T10:00:00.000Z"})
    await repo.create({"id": "b1", "userId": "bob", "timestamp": "2026-03-01T10:00:00.000Z"})

    listed = await repo.list_for_user("alice")

    assert [item["id"] for item in listed] == ["a2", "a1"]
    assert (await repo.get("b1"))["userId"] == "bob"
    assert await repo.get("zz") is None


@pytest.mark.asyncio
async def test_profiles_do_not_leak_into_assessment_listing(store):
    await ProfileRepository(store).save({"userId": "alice", "timestamp": "2026-05-01T00:00:00Z"})
    assert await AssessmentRepository(store).list_for_user("alice") == []


@pytest.mark.asyncio
async def test_cognitive_repository_round_trip(store):
    repo = CognitiveRepository(store)
    await repo.create_assessment({"id": "c1", "userId": "alice", "timestamp": "2026-01-01T00:00:00Z"})
    await repo.save_profile({"userId": "alice", "assessmentCount": 1})

    assert (await repo.get_assessment("c1"))["id"] == "c1"
    assert (await repo.get_profile("alice"))["assessmentCount"] == 1
    assert [item["id"] for item in await repo.list_for_user("alice")] == ["c1"]
    assert sorted(await store.list_names("cognitive_")) == [
        "cognitive_assessment_c1",
        "cognitive_profile_alice",
    ]
