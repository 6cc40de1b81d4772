"""
Service for generating LLM prompts.
"""
from typing import Optional, List, Tuple


def generate_ai_lesson_prompt(
    user_level: str,
    completed_topics: List[str],
    preferred_exercise_types: List[str]
) -> Tuple[str, str]:
    """
    Generate system instruction and user prompt for AI lesson generation.

    Args:
        user_level: Learner level ('beginner', 'intermediate' or 'advanced')
        completed_topics: Titles of lessons the learner has completed
        preferred_exercise_types: Exercise types the learner prefers

    Returns:
        Tuple of (system_instruction, user_prompt)
    """
    system_instruction = (
        "You are an expert Croatian language teacher creating engaging lessons for American teenagers. "
        "Focus on practical, everyday Croatian that builds confidence."
    )

    topics_text = ', '.join(completed_topics) if completed_topics else 'none yet'
    types_text = ', '.join(preferred_exercise_types) if preferred_exercise_types else 'any'

    prompt = f"""Create a Croatian language lesson for a {user_level} level 13-year-old American student.

Previously completed topics: {topics_text}
Preferred exercise types: {types_text}

Generate a lesson with:
- A creative title and description
- 4-5 exercises of varying types (translation, multiple-choice, word-bank, speaking)
- Croatian phrases appropriate for beginners/intermediate level
- Include everyday vocabulary and practical phrases
- Ensure exercises build on each other progressively

Return ONLY valid JSON in this exact format (no markdown, no explanations):
{{
  "title": "lesson title",
  "description": "lesson description",
  "exercises": [
    {{
      "type": "translation | multiple-choice | word-bank | speaking",
      "question": "exercise question",
      "croatianText": "Croatian text if applicable",
      "englishText": "English text if applicable",
      "options": ["option1", "option2", "option3", "option4"],
      "correctAnswer": "correct answer",
      "hints": ["hint1", "hint2"]
    }}
  ]
}}

Rules:
1. "options" is required for multiple-choice and word-bank exercises, null otherwise
2. For word-bank exercises, "correctAnswer" must be the options joined with single spaces in the right order
3. "hints" is optional"""

    return system_instruction, prompt


def generate_pronunciation_prompt(original_text: str, spoken_text: str) -> Tuple[str, str]:
    """
    Generate system instruction and user prompt for pronunciation scoring.

    Args:
        original_text: The Croatian text the learner was asked to say
        spoken_text: Speech-recognition transcript of what the learner said

    Returns:
        Tuple of (system_instruction, user_prompt)
    """
    system_instruction = "You are a Croatian pronunciation expert providing encouraging feedback to young learners."

    prompt = f"""Compare the spoken Croatian text with the original and provide pronunciation feedback.

Original Croatian: "{original_text}"
Spoken text (approximation): "{spoken_text}"

Evaluate pronunciation accuracy on a scale of 0-100 and provide constructive feedback for a 13-year-old learner. Consider common pronunciation challenges for American English speakers learning Croatian.

Return ONLY valid JSON in this exact format (no markdown, no explanations):
{{
  "score": number (0-100),
  "feedback": "encouraging feedback with specific tips",
  "isCorrect": boolean (true if score >= 70)
}}"""

    return system_instruction, prompt


def generate_hint_prompt(
    exercise_type: str,
    question: str,
    croatian_text: Optional[str] = None,
    english_text: Optional[str] = None
) -> Tuple[str, str]:
    """
    Generate system instruction and user prompt for an exercise hint.

    Returns:
        Tuple of (system_instruction, user_prompt)
    """
    system_instruction = "You are a supportive Croatian language tutor providing helpful hints to young learners."

    context_lines = []
    if croatian_text:
        context_lines.append(f"Croatian text: {croatian_text}")
    if english_text:
        context_lines.append(f"English text: {english_text}")
    context_text = ("\n" + "\n".join(context_lines)) if context_lines else ""

    prompt = f"""Provide a helpful hint for this Croatian language exercise:

Exercise Type: {exercise_type}
Question: {question}{context_text}

Generate an encouraging hint that guides the student without giving away the answer. Make it age-appropriate for a 13-year-old."""

    return system_instruction, prompt
