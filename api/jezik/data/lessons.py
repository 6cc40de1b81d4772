"""
Base lesson catalog: five units of ten lessons, plus exercises for the first lessons.
"""
from typing import List, Dict, Any

BASE_LESSONS: List[Dict[str, Any]] = [
    # Unit 1: Form basic sentences
    {"id": 1, "title": "Greetings", "description": "Learn basic Croatian greetings", "unit": 1, "order": 1, "is_locked": False, "xp_reward": 10, "type": "base"},
    {"id": 2, "title": "Family", "description": "Family members and relationships", "unit": 1, "order": 2, "is_locked": False, "xp_reward": 10, "type": "base"},
    {"id": 3, "title": "Food", "description": "Basic food vocabulary", "unit": 1, "order": 3, "is_locked": True, "xp_reward": 10, "type": "base"},
    {"id": 4, "title": "Animals", "description": "Common animals", "unit": 1, "order": 4, "is_locked": True, "xp_reward": 10, "type": "base"},
    {"id": 5, "title": "Colors", "description": "Basic colors", "unit": 1, "order": 5, "is_locked": True, "xp_reward": 10, "type": "base"},
    {"id": 6, "title": "Numbers", "description": "Numbers 1-20", "unit": 1, "order": 6, "is_locked": True, "xp_reward": 10, "type": "base"},
    {"id": 7, "title": "Days & Time", "description": "Days of the week and time", "unit": 1, "order": 7, "is_locked": True, "xp_reward": 10, "type": "base"},
    {"id": 8, "title": "Weather", "description": "Weather expressions", "unit": 1, "order": 8, "is_locked": True, "xp_reward": 10, "type": "base"},
    {"id": 9, "title": "House", "description": "Parts of the house", "unit": 1, "order": 9, "is_locked": True, "xp_reward": 10, "type": "base"},
    {"id": 10, "title": "Body Parts", "description": "Basic body vocabulary", "unit": 1, "order": 10, "is_locked": True, "xp_reward": 10, "type": "base"},
    # Unit 2: Navigate familiar places
    {"id": 11, "title": "Directions", "description": "Basic directions and locations", "unit": 2, "order": 11, "is_locked": True, "xp_reward": 15, "type": "base"},
    {"id": 12, "title": "City Places", "description": "Places in the city", "unit": 2, "order": 12, "is_locked": True, "xp_reward": 15, "type": "base"},
    {"id": 13, "title": "Transportation", "description": "Ways to travel", "unit": 2, "order": 13, "is_locked": True, "xp_reward": 15, "type": "base"},
    {"id": 14, "title": "Shopping", "description": "Shopping vocabulary", "unit": 2, "order": 14, "is_locked": True, "xp_reward": 15, "type": "base"},
    {"id": 15, "title": "Restaurant", "description": "Ordering food", "unit": 2, "order": 15, "is_locked": True, "xp_reward": 15, "type": "base"},
    {"id": 16, "title": "Hotel", "description": "Hotel situations", "unit": 2, "order": 16, "is_locked": True, "xp_reward": 15, "type": "base"},
    {"id": 17, "title": "Post Office", "description": "Postal services", "unit": 2, "order": 17, "is_locked": True, "xp_reward": 15, "type": "base"},
    {"id": 18, "title": "Bank", "description": "Banking basics", "unit": 2, "order": 18, "is_locked": True, "xp_reward": 15, "type": "base"},
    {"id": 19, "title": "Hospital", "description": "Medical situations", "unit": 2, "order": 19, "is_locked": True, "xp_reward": 15, "type": "base"},
    {"id": 20, "title": "School", "description": "School vocabulary", "unit": 2, "order": 20, "is_locked": True, "xp_reward": 15, "type": "base"},
    # Unit 3: Express yourself
    {"id": 21, "title": "Emotions", "description": "Expressing feelings", "unit": 3, "order": 21, "is_locked": True, "xp_reward": 20, "type": "base"},
    {"id": 22, "title": "Hobbies", "description": "Talking about interests", "unit": 3, "order": 22, "is_locked": True, "xp_reward": 20, "type": "base"},
    {"id": 23, "title": "Sports", "description": "Sports and activities", "unit": 3, "order": 23, "is_locked": True, "xp_reward": 20, "type": "base"},
    {"id": 24, "title": "Music", "description": "Musical terms", "unit": 3, "order": 24, "is_locked": True, "xp_reward": 20, "type": "base"},
    {"id": 25, "title": "Art", "description": "Artistic expressions", "unit": 3, "order": 25, "is_locked": True, "xp_reward": 20, "type": "base"},
    {"id": 26, "title": "Clothes", "description": "Clothing vocabulary", "unit": 3, "order": 26, "is_locked": True, "xp_reward": 20, "type": "base"},
    {"id": 27, "title": "Technology", "description": "Modern technology", "unit": 3, "order": 27, "is_locked": True, "xp_reward": 20, "type": "base"},
    {"id": 28, "title": "Nature", "description": "Natural world", "unit": 3, "order": 28, "is_locked": True, "xp_reward": 20, "type": "base"},
    {"id": 29, "title": "Seasons", "description": "Seasons and months", "unit": 3, "order": 29, "is_locked": True, "xp_reward": 20, "type": "base"},
    {"id": 30, "title": "Holidays", "description": "Croatian holidays", "unit": 3, "order": 30, "is_locked": True, "xp_reward": 20, "type": "base"},
    # Unit 4: Past and future
    {"id": 31, "title": "Past Tense", "description": "Talking about the past", "unit": 4, "order": 31, "is_locked": True, "xp_reward": 25, "type": "base"},
    {"id": 32, "title": "Future Plans", "description": "Discussing future", "unit": 4, "order": 32, "is_locked": True, "xp_reward": 25, "type": "base"},
    {"id": 33, "title": "Childhood", "description": "Childhood memories", "unit": 4, "order": 33, "is_locked": True, "xp_reward": 25, "type": "base"},
    {"id": 34, "title": "Travel", "description": "Travel experiences", "unit": 4, "order": 34, "is_locked": True, "xp_reward": 25, "type": "base"},
    {"id": 35, "title": "Work", "description": "Jobs and careers", "unit": 4, "order": 35, "is_locked": True, "xp_reward": 25, "type": "base"},
    {"id": 36, "title": "Goals", "description": "Dreams and ambitions", "unit": 4, "order": 36, "is_locked": True, "xp_reward": 25, "type": "base"},
    {"id": 37, "title": "History", "description": "Croatian history", "unit": 4, "order": 37, "is_locked": True, "xp_reward": 25, "type": "base"},
    {"id": 38, "title": "Traditions", "description": "Cultural traditions", "unit": 4, "order": 38, "is_locked": True, "xp_reward": 25, "type": "base"},
    {"id": 39, "title": "Celebrations", "description": "Special occasions", "unit": 4, "order": 39, "is_locked": True, "xp_reward": 25, "type": "base"},
    {"id": 40, "title": "Stories", "description": "Telling stories", "unit": 4, "order": 40, "is_locked": True, "xp_reward": 25, "type": "base"},
    # Unit 5: Advanced topics
    {"id": 41, "title": "Business", "description": "Business Croatian", "unit": 5, "order": 41, "is_locked": True, "xp_reward": 30, "type": "base"},
    {"id": 42, "title": "Politics", "description": "Political discussions", "unit": 5, "order": 42, "is_locked": True, "xp_reward": 30, "type": "base"},
    {"id": 43, "title": "Environment", "description": "Environmental topics", "unit": 5, "order": 43, "is_locked": True, "xp_reward": 30, "type": "base"},
    {"id": 44, "title": "Science", "description": "Scientific terms", "unit": 5, "order": 44, "is_locked": True, "xp_reward": 30, "type": "base"},
    {"id": 45, "title": "Philosophy", "description": "Abstract concepts", "unit": 5, "order": 45, "is_locked": True, "xp_reward": 30, "type": "base"},
    {"id": 46, "title": "Literature", "description": "Croatian literature", "unit": 5, "order": 46, "is_locked": True, "xp_reward": 30, "type": "base"},
    {"id": 47, "title": "Media", "description": "News and media", "unit": 5, "order": 47, "is_locked": True, "xp_reward": 30, "type": "base"},
    {"id": 48, "title": "Internet", "description": "Digital communication", "unit": 5, "order": 48, "is_locked": True, "xp_reward": 30, "type": "base"},
    {"id": 49, "title": "Debate", "description": "Expressing opinions", "unit": 5, "order": 49, "is_locked": True, "xp_reward": 30, "type": "base"},
    {"id": 50, "title": "Mastery", "description": "Advanced conversation", "unit": 5, "order": 50, "is_locked": True, "xp_reward": 50, "type": "base"},
]

BASE_EXERCISES: List[Dict[str, Any]] = [
    # Lesson 1: Greetings
    {
        "lesson_id": 1,
        "type": "translation",
        "question": "Translate this Croatian greeting to English",
        "croatian_text": "Dobro jutro",
        "english_text": "Good morning",
        "correct_answer": "good morning",
        "hints": ["Think about the time of day", "This is a common morning greeting"],
        "order": 1,
    },
    {
        "lesson_id": 1,
        "type": "multiple-choice",
        "question": "How do you say 'Hello' in Croatian?",
        "english_text": "Hello",
        "options": ["Bok", "Zbogom", "Molim", "Hvala"],
        "correct_answer": "Bok",
        "hints": ["It's a casual greeting", "Starts with 'B'"],
        "order": 2,
    },
    {
        "lesson_id": 1,
        "type": "speaking",
        "question": "Say 'Good evening' in Croatian",
        "croatian_text": "Dobra večer",
        "english_text": "Good evening",
        "correct_answer": "dobra večer",
        "hints": ["Remember Croatian pronunciation", "Evening = večer"],
        "order": 3,
    },
    {
        "lesson_id": 1,
        "type": "word-bank",
        "question": "Arrange these words to say 'How are you?' in Croatian",
        "croatian_text": "Kako ste?",
        "english_text": "How are you?",
        "options": ["Kako", "ste", "?", "dobro"],
        "correct_answer": "Kako ste?",
        "hints": ["Start with 'Kako'", "Formal version uses 'ste'"],
        "order": 4,
    },
    {
        "lesson_id": 1,
        "type": "translation",
        "question": "Translate 'Thank you' to Croatian",
        "croatian_text": "Hvala",
        "english_text": "Thank you",
        "correct_answer": "hvala",
        "hints": ["Starts with 'Hv'", "Very common word"],
        "order": 5,
    },
    # Lesson 2: Family
    {
        "lesson_id": 2,
        "type": "translation",
        "question": "Translate 'My family' to Croatian",
        "croatian_text": "Moja obitelj",
        "english_text": "My family",
        "correct_answer": "moja obitelj",
        "hints": ["Moja = my (feminine)", "Family = obitelj"],
        "order": 1,
    },
    {
        "lesson_id": 2,
        "type": "multiple-choice",
        "question": "What is 'mother' in Croatian?",
        "english_text": "mother",
        "options": ["majka", "otac", "sestra", "brat"],
        "correct_answer": "majka",
        "hints": ["Sounds similar to 'mama'", "Starts with 'maj'"],
        "order": 2,
    },
    {
        "lesson_id": 2,
        "type": "speaking",
        "question": "Say 'I have a brother' in Croatian",
        "croatian_text": "Imam brata",
        "english_text": "I have a brother",
        "correct_answer": "imam brata",
        "hints": ["Imam = I have", "Brother = brat (but changes to 'brata')"],
        "order": 3,
    },
    {
        "lesson_id": 2,
        "type": "translation",
        "question": "Translate this Croatian sentence",
        "croatian_text": "Moj otac radi",
        "english_text": "My father works",
        "correct_answer": "my father works",
        "hints": ["Moj = my (masculine)", "otac = father", "radi = works"],
        "order": 4,
    },
]

DEFAULT_USER: Dict[str, Any] = {
    "id": "default-user",
    "username": "learner",
    "email": "learner@example.com",
    "hearts": 4,
    "xp": 1250,
    "streak": 7,
    "gems": 500,
    "current_lesson_id": 2,
    "completed_lessons": [1],
    "achievements": ["first_lesson"],
}
