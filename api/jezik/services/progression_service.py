"""
Progression service: the rules by which a learner's state evolves.

Every function here is pure. It takes the current learner snapshot plus a
lesson or exercise and returns a new snapshot; persisting it is the caller's
job (see the storage backends).

Rules:
- A correct answer is worth a fixed CORRECT_ANSWER_XP, independent of the
  lesson's xp_reward (which is only paid out on lesson completion).
- A wrong answer costs one heart, floored at 0. Attempts are still graded at
  0 hearts; blocking play on empty hearts is a client policy.
- Lesson N > 1 is unlocked only by completing lesson N - 1, across unit
  boundaries. Lesson 1 is always unlocked.
"""
from enum import Enum
from typing import Iterable, Tuple

from jezik.schemas.exercise import Exercise
from jezik.schemas.lesson import Lesson
from jezik.schemas.user import User, MAX_HEARTS


CORRECT_ANSWER_XP = 10
FIRST_LESSON_ID = 1


class Verdict(str, Enum):
    """Outcome of grading one attempt."""
    CORRECT = "correct"
    INCORRECT = "incorrect"


class LessonState(str, Enum):
    """Per-learner state of a lesson on the lesson map."""
    LOCKED = "locked"
    UNLOCKED = "unlocked"
    COMPLETED = "completed"


def normalize_answer(answer: str) -> str:
    """
    Normalize an answer for comparison.

    Only surrounding whitespace and letter case are ignored; punctuation and
    diacritics are significant ("Kako ste?" != "Kako ste", "večer" != "vecer").
    """
    return answer.strip().lower()


def join_word_bank(selection: Iterable[str]) -> str:
    """Reduce word-bank tiles to a single answer, space-joined in selection order."""
    return " ".join(selection)


def is_correct_answer(exercise: Exercise, submitted_answer: str) -> bool:
    return normalize_answer(submitted_answer) == normalize_answer(exercise.correct_answer)


def evaluate_attempt(exercise: Exercise, submitted_answer: str, learner: User) -> Tuple[Verdict, User]:
    """
    Grade an answer and apply its reward or penalty.

    Args:
        exercise: Exercise being answered (correct_answer must be non-empty)
        submitted_answer: The learner's answer; multiple-choice and word-bank
            selections must already be reduced to one string
        learner: Current learner snapshot (not modified)

    Returns:
        Tuple of (verdict, next learner snapshot)
    """
    if is_correct_answer(exercise, submitted_answer):
        next_learner = learner.model_copy(update={"xp": learner.xp + CORRECT_ANSWER_XP}, deep=True)
        return Verdict.CORRECT, next_learner

    next_learner = learner.model_copy(update={"hearts": max(0, learner.hearts - 1)}, deep=True)
    return Verdict.INCORRECT, next_learner


def complete_lesson(lesson: Lesson, learner: User) -> User:
    """
    Mark a lesson as completed and pay out its XP reward.

    The completed-lessons set only grows, but xp and current_lesson_id are
    applied on every call, so completing the same lesson again pays the
    reward again.

    Args:
        lesson: Lesson being completed
        learner: Current learner snapshot (not modified)

    Returns:
        Next learner snapshot
    """
    completed_lessons = list(learner.completed_lessons)
    if lesson.id not in completed_lessons:
        completed_lessons.append(lesson.id)

    return learner.model_copy(update={
        "completed_lessons": completed_lessons,
        "xp": learner.xp + lesson.xp_reward,
        "current_lesson_id": lesson.id + 1,
    }, deep=True)


def unlock_state(lesson: Lesson, learner: User) -> bool:
    """Whether the learner may open this lesson. Derived on every read, never stored."""
    if lesson.id == FIRST_LESSON_ID:
        return True
    return (lesson.id - 1) in learner.completed_lessons


def lesson_state(lesson: Lesson, learner: User) -> LessonState:
    if lesson.id in learner.completed_lessons:
        return LessonState.COMPLETED
    if unlock_state(lesson, learner):
        return LessonState.UNLOCKED
    return LessonState.LOCKED


def refill_hearts(learner: User) -> User:
    return learner.model_copy(update={"hearts": MAX_HEARTS}, deep=True)
