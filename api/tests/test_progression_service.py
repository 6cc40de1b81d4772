from conftest import make_exercise, make_lesson

from jezik.services.progression_service import (
    CORRECT_ANSWER_XP,
    LessonState,
    Verdict,
    complete_lesson,
    evaluate_attempt,
    is_correct_answer,
    join_word_bank,
    lesson_state,
    normalize_answer,
    refill_hearts,
    unlock_state,
)


def test_normalize_answer_ignores_case_and_surrounding_whitespace():
    assert normalize_answer("  Dobro Jutro \n") == "dobro jutro"
    assert normalize_answer("Kako ste?") != normalize_answer("Kako ste")
    assert normalize_answer("večer") != normalize_answer("vecer")


def test_correct_answer_earns_fixed_xp_and_keeps_hearts(learner):
    exercise = make_exercise("Bok")
    verdict, next_learner = evaluate_attempt(exercise, " bok ", learner)

    assert verdict == Verdict.CORRECT
    assert next_learner.xp == learner.xp + CORRECT_ANSWER_XP
    assert next_learner.hearts == learner.hearts


def test_wrong_answer_costs_one_heart_and_no_xp(learner):
    exercise = make_exercise("Bok")
    verdict, next_learner = evaluate_attempt(exercise, "Zbogom", learner)

    assert verdict == Verdict.INCORRECT
    assert next_learner.hearts == learner.hearts - 1
    assert next_learner.xp == learner.xp


def test_hearts_never_go_below_zero(learner):
    exercise = make_exercise("hvala")
    one_heart = learner.model_copy(update={"hearts": 1})

    _, after_first = evaluate_attempt(exercise, "molim", one_heart)
    _, after_second = evaluate_attempt(exercise, "molim", after_first)

    assert after_first.hearts == 0
    assert after_second.hearts == 0


def test_attempts_are_graded_at_zero_hearts(learner):
    exercise = make_exercise("hvala")
    no_hearts = learner.model_copy(update={"hearts": 0})

    verdict, next_learner = evaluate_attempt(exercise, "Hvala", no_hearts)

    assert verdict == Verdict.CORRECT
    assert next_learner.xp == CORRECT_ANSWER_XP
    assert next_learner.hearts == 0


def test_evaluate_attempt_does_not_modify_input(learner):
    exercise = make_exercise("hvala")
    evaluate_attempt(exercise, "wrong", learner)
    evaluate_attempt(exercise, "hvala", learner)

    assert learner.hearts == 5
    assert learner.xp == 0


def test_punctuation_is_significant():
    exercise = make_exercise("Kako ste?", exercise_type="word-bank")
    assert is_correct_answer(exercise, "kako ste?")
    assert not is_correct_answer(exercise, "Kako ste")


def test_word_bank_selection_is_joined_in_order():
    exercise = make_exercise("Kako ste?", exercise_type="word-bank")
    assert join_word_bank(["Kako", "ste?"]) == "Kako ste?"
    assert is_correct_answer(exercise, join_word_bank(["Kako", "ste?"]))
    assert not is_correct_answer(exercise, join_word_bank(["ste?", "Kako"]))


def test_complete_lesson_updates_learner(learner):
    lesson = make_lesson(1, xp_reward=10)
    next_learner = complete_lesson(lesson, learner)

    assert next_learner.completed_lessons == [1]
    assert next_learner.xp == 10
    assert next_learner.current_lesson_id == 2
    assert learner.completed_lessons == []


def test_completing_a_lesson_again_pays_xp_again(learner):
    lesson = make_lesson(3, xp_reward=15)
    once = complete_lesson(lesson, learner)
    twice = complete_lesson(lesson, once)

    assert twice.completed_lessons == [3]
    assert twice.xp == 30
    assert twice.current_lesson_id == 4


def test_replaying_an_earlier_lesson_moves_current_lesson_back(learner):
    progressed = learner.model_copy(update={"completed_lessons": [1, 2, 3], "current_lesson_id": 4})
    replayed = complete_lesson(make_lesson(1), progressed)

    assert replayed.current_lesson_id == 2
    assert replayed.completed_lessons == [1, 2, 3]


def test_first_lesson_is_always_unlocked(learner):
    assert unlock_state(make_lesson(1), learner) is True


def test_lesson_unlocks_only_after_previous_is_completed(learner):
    assert unlock_state(make_lesson(2), learner) is False

    after_first = complete_lesson(make_lesson(1), learner)
    assert unlock_state(make_lesson(2), after_first) is True
    assert unlock_state(make_lesson(3), after_first) is False


def test_unlock_crosses_unit_boundaries(learner):
    finished_unit = learner.model_copy(update={"completed_lessons": list(range(1, 11))})
    assert unlock_state(make_lesson(11, unit=2), finished_unit) is True


def test_unlock_ignores_gaps_in_completed_lessons(learner):
    # Only the immediate predecessor matters
    skipped = learner.model_copy(update={"completed_lessons": [4]})
    assert unlock_state(make_lesson(5), skipped) is True
    assert unlock_state(make_lesson(4), skipped) is False


def test_lesson_state_walkthrough(learner):
    lessons = [make_lesson(lesson_id) for lesson_id in (1, 2, 3)]

    states = [lesson_state(lesson, learner) for lesson in lessons]
    assert states == [LessonState.UNLOCKED, LessonState.LOCKED, LessonState.LOCKED]

    learner = complete_lesson(lessons[0], learner)
    states = [lesson_state(lesson, learner) for lesson in lessons]
    assert states == [LessonState.COMPLETED, LessonState.UNLOCKED, LessonState.LOCKED]

    learner = complete_lesson(lessons[1], learner)
    states = [lesson_state(lesson, learner) for lesson in lessons]
    assert states == [LessonState.COMPLETED, LessonState.COMPLETED, LessonState.UNLOCKED]


def test_refill_hearts(learner):
    assert refill_hearts(learner.model_copy(update={"hearts": 0})).hearts == 5


def test_returned_learner_does_not_share_lists_with_input(learner):
    learner = learner.model_copy(update={"completed_lessons": [1], "achievements": ["first_lesson"]})
    exercise = make_exercise("hvala")

    _, after_correct = evaluate_attempt(exercise, "hvala", learner)
    _, after_wrong = evaluate_attempt(exercise, "molim", learner)
    after_completion = complete_lesson(make_lesson(2), learner)
    refilled = refill_hearts(learner)

    for next_learner in (after_correct, after_wrong, after_completion, refilled):
        next_learner.completed_lessons.append(99)
        next_learner.achievements.append("streak_master")

    assert learner.completed_lessons == [1]
    assert learner.achievements == ["first_lesson"]
