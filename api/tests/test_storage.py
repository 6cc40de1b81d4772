"""
Behaviour shared by every storage backend.
"""
from datetime import datetime, timedelta, timezone

import pytest

from jezik.core.exceptions import ConflictError
from jezik.data.lessons import BASE_LESSONS, DEFAULT_USER
from jezik.schemas.ai import AiLessonCreate
from jezik.schemas.exercise import ExerciseCreate
from jezik.schemas.progress import ProgressCreate
from jezik.schemas.user import UserCreate


@pytest.fixture(params=["memory", "database"])
def any_storage(request):
    fixture_name = "storage" if request.param == "memory" else "db_storage"
    return request.getfixturevalue(fixture_name)


def test_default_learner_is_seeded(any_storage):
    user = any_storage.get_user(DEFAULT_USER["id"])
    assert user is not None
    assert user.hearts == 4
    assert user.xp == 1250
    assert user.completed_lessons == [1]
    assert user.created_at is not None


def test_missing_entities_return_none(any_storage):
    assert any_storage.get_user("nobody") is None
    assert any_storage.get_user_by_username("nobody") is None
    assert any_storage.get_lesson(999) is None
    assert any_storage.get_exercise("missing") is None
    assert any_storage.update_user("nobody", {"xp": 1}) is None
    assert any_storage.get_exercises_by_lesson_id(999) == []


def test_create_user_uses_defaults(any_storage):
    user = any_storage.create_user(UserCreate(username="ivana", email="ivana@jezik.hr"))

    assert user.id
    assert (user.hearts, user.xp, user.streak, user.gems) == (5, 0, 0, 500)
    assert user.current_lesson_id == 1
    assert user.completed_lessons == []
    assert any_storage.get_user_by_username("ivana").id == user.id


def test_duplicate_username_conflicts(any_storage):
    any_storage.create_user(UserCreate(username="ivana", email="ivana@jezik.hr"))
    with pytest.raises(ConflictError):
        any_storage.create_user(UserCreate(username="ivana", email="other@jezik.hr"))


def test_update_user_merges_present_fields(any_storage):
    updated = any_storage.update_user(DEFAULT_USER["id"], {"xp": 2000, "completed_lessons": [1, 2]})

    assert updated.xp == 2000
    assert updated.completed_lessons == [1, 2]
    assert updated.hearts == 4
    assert updated.gems == 500

    stored = any_storage.get_user(DEFAULT_USER["id"])
    assert stored.xp == 2000
    assert stored.completed_lessons == [1, 2]


def test_update_user_clears_nullable_field(any_storage):
    updated = any_storage.update_user(DEFAULT_USER["id"], {"last_activity_date": None})
    assert updated.last_activity_date is None
    assert updated.streak == 7


def test_update_user_never_changes_id_or_created_at(any_storage):
    before = any_storage.get_user(DEFAULT_USER["id"])
    updated = any_storage.update_user(DEFAULT_USER["id"], {"id": "hijack", "created_at": None, "xp": 1})

    assert updated.id == DEFAULT_USER["id"]
    assert updated.created_at == before.created_at
    assert any_storage.get_user("hijack") is None


def test_returned_users_are_not_aliased(any_storage):
    user = any_storage.get_user(DEFAULT_USER["id"])
    user.completed_lessons.append(42)
    user.xp = 0

    stored = any_storage.get_user(DEFAULT_USER["id"])
    assert stored.completed_lessons == [1]
    assert stored.xp == 1250


def test_save_user_persists_snapshot(any_storage):
    user = any_storage.get_user(DEFAULT_USER["id"])
    saved = any_storage.save_user(user.model_copy(update={"gems": 150, "hearts": 5}))

    assert saved.gems == 150
    assert any_storage.get_user(DEFAULT_USER["id"]).hearts == 5


def test_lessons_are_sorted_by_order(any_storage):
    lessons = any_storage.get_all_lessons()
    assert len(lessons) == len(BASE_LESSONS)
    assert [lesson.order for lesson in lessons] == sorted(lesson.order for lesson in lessons)
    assert [lesson.id for lesson in any_storage.get_lessons_by_unit(2)] == list(range(11, 21))


def test_create_lesson_upserts(any_storage):
    lesson = any_storage.get_lesson(1)
    any_storage.create_lesson(lesson.model_copy(update={"title": "Pozdravi"}))

    assert any_storage.get_lesson(1).title == "Pozdravi"
    assert len(any_storage.get_all_lessons()) == len(BASE_LESSONS)


def test_exercises_are_sorted_by_order(any_storage):
    exercises = any_storage.get_exercises_by_lesson_id(1)
    assert [exercise.order for exercise in exercises] == [1, 2, 3, 4, 5]
    assert exercises[1].options == ["Bok", "Zbogom", "Molim", "Hvala"]

    created = any_storage.create_exercise(ExerciseCreate(
        lesson_id=1, type="translation", question="Translate 'Please'",
        correct_answer="molim", order=0,
    ))
    assert any_storage.get_exercise(created.id) == created
    assert any_storage.get_exercises_by_lesson_id(1)[0].id == created.id


def test_progress_records_append(any_storage):
    open_record = any_storage.update_progress(ProgressCreate(
        user_id=DEFAULT_USER["id"], lesson_id=2, attempts=1,
    ))
    done_record = any_storage.update_progress(ProgressCreate(
        user_id=DEFAULT_USER["id"], lesson_id=2, is_completed=True, attempts=2, correct_attempts=1,
    ))

    assert open_record.completed_at is None
    assert done_record.completed_at is not None

    records = any_storage.get_user_progress(DEFAULT_USER["id"], 2)
    assert {record.id for record in records} == {open_record.id, done_record.id}
    assert any_storage.get_user_progress(DEFAULT_USER["id"], 3) == []


def test_ai_lessons_newest_first(any_storage):
    first = any_storage.create_ai_lesson(AiLessonCreate(
        user_id=DEFAULT_USER["id"], title="At the beach", content={"title": "At the beach"}, difficulty="beginner",
    ))
    second = any_storage.create_ai_lesson(AiLessonCreate(
        user_id=DEFAULT_USER["id"], title="At the market", content={"title": "At the market"}, difficulty="beginner",
    ))

    lessons = any_storage.get_user_ai_lessons(DEFAULT_USER["id"])
    assert {lesson.id for lesson in lessons} == {first.id, second.id}
    created = [lesson.created_at for lesson in lessons]
    assert created == sorted(created, reverse=True)
    assert {lesson.title: lesson.content for lesson in lessons}["At the market"] == {"title": "At the market"}
    assert any_storage.get_user_ai_lessons("nobody") == []


def test_memory_ai_lessons_with_equal_timestamps_keep_latest_first(storage, monkeypatch):
    import jezik.services.storage.memory as memory_module

    frozen = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    monkeypatch.setattr(memory_module, "utc_now", lambda: frozen)

    first = storage.create_ai_lesson(AiLessonCreate(user_id="u", title="One", difficulty="beginner"))
    second = storage.create_ai_lesson(AiLessonCreate(user_id="u", title="Two", difficulty="beginner"))

    assert [lesson.id for lesson in storage.get_user_ai_lessons("u")] == [second.id, first.id]


def test_timestamps_are_timezone_aware(any_storage):
    user = any_storage.create_user(UserCreate(username="ivana", email="ivana@jezik.hr"))
    progress = any_storage.update_progress(ProgressCreate(user_id=user.id, lesson_id=1, is_completed=True))
    ai_lesson = any_storage.create_ai_lesson(AiLessonCreate(
        user_id=user.id, title="Na plaži", content={"title": "Na plaži"}, difficulty="beginner",
    ))

    assert any_storage.get_user(user.id).created_at.utcoffset() == timedelta(0)
    assert any_storage.get_user_progress(user.id, 1)[0].completed_at.utcoffset() == timedelta(0)
    assert any_storage.get_user_ai_lessons(user.id)[0].created_at.utcoffset() == timedelta(0)
    assert progress.completed_at.tzinfo is not None
    assert ai_lesson.created_at.tzinfo is not None


def test_saving_a_learner_after_progress_persists(any_storage):
    user = any_storage.get_user(DEFAULT_USER["id"])
    saved = any_storage.save_user(user.model_copy(update={"xp": user.xp + 10, "hearts": 3}))

    assert saved.created_at == user.created_at
    assert any_storage.get_user(DEFAULT_USER["id"]).xp == 1260
