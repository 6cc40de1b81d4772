from jezik.data.lessons import BASE_LESSONS, BASE_EXERCISES
from jezik.services.catalog_service import seed_catalog
from jezik.services.storage import MemoryStorage


def test_seed_catalog_loads_lessons_and_exercises():
    storage = MemoryStorage()
    counts = seed_catalog(storage)

    assert counts == {'lessons_upserted': len(BASE_LESSONS), 'exercises_created': len(BASE_EXERCISES)}
    assert len(storage.get_all_lessons()) == 50
    assert len(storage.get_exercises_by_lesson_id(1)) == 5
    assert len(storage.get_exercises_by_lesson_id(2)) == 4


def test_seed_catalog_is_idempotent(db_storage):
    exercise_ids = [exercise.id for exercise in db_storage.get_exercises_by_lesson_id(1)]

    counts = seed_catalog(db_storage)

    assert counts['exercises_created'] == 0
    assert [exercise.id for exercise in db_storage.get_exercises_by_lesson_id(1)] == exercise_ids
    assert len(db_storage.get_all_lessons()) == 50


def test_base_catalog_shape():
    lessons = {lesson["id"]: lesson for lesson in BASE_LESSONS}
    assert sorted(lessons) == list(range(1, 51))
    assert all(lesson["xp_reward"] > 0 for lesson in BASE_LESSONS)
    assert lessons[11]["unit"] == 2
    assert all(exercise["correct_answer"] for exercise in BASE_EXERCISES)
