from jezik.data.lessons import DEFAULT_USER


def test_list_lessons(client):
    response = client.get("/api/lessons")
    assert response.status_code == 200
    lessons = response.json()
    assert len(lessons) == 50
    assert lessons[0]["xpReward"] == 10
    assert lessons[0]["isLocked"] is False


def test_get_lesson(client):
    assert client.get("/api/lessons/11").json()["title"] == "Directions"
    assert client.get("/api/lessons/999").status_code == 404


def test_lesson_exercises(client):
    exercises = client.get("/api/lessons/1/exercises").json()
    assert [exercise["order"] for exercise in exercises] == [1, 2, 3, 4, 5]
    assert exercises[1]["correctAnswer"] == "Bok"
    assert client.get("/api/lessons/999/exercises").json() == []


def test_complete_lesson(client):
    response = client.post("/api/lesson/2/complete", json={"userId": DEFAULT_USER["id"]})
    assert response.status_code == 200
    user = response.json()
    assert user["completedLessons"] == [1, 2]
    assert user["xp"] == 1260
    assert user["currentLessonId"] == 3

    states = {lesson["id"]: lesson["state"] for lesson in client.get(f"/api/user/{DEFAULT_USER['id']}/lessons").json()}
    assert states[3] == "unlocked"


def test_complete_lesson_again_pays_again(client):
    client.post("/api/lesson/1/complete", json={"userId": DEFAULT_USER["id"]})
    user = client.post("/api/lesson/1/complete", json={"userId": DEFAULT_USER["id"]}).json()

    assert user["completedLessons"] == [1]
    assert user["xp"] == 1270
    assert user["currentLessonId"] == 2


def test_complete_lesson_missing_user_or_lesson(client):
    assert client.post("/api/lesson/1/complete", json={"userId": "nobody"}).status_code == 404
    assert client.post("/api/lesson/999/complete", json={"userId": DEFAULT_USER["id"]}).status_code == 404
    assert client.post("/api/lesson/1/complete", json={}).status_code == 400


def test_record_and_read_progress(client):
    response = client.post("/api/progress", json={
        "userId": DEFAULT_USER["id"],
        "lessonId": 2,
        "isCompleted": True,
        "attempts": 3,
        "correctAttempts": 2,
    })
    assert response.status_code == 200
    assert response.json()["completedAt"] is not None

    records = client.get(f"/api/user/{DEFAULT_USER['id']}/progress/2").json()
    assert len(records) == 1
    assert records[0]["attempts"] == 3


def test_record_progress_validation(client):
    assert client.post("/api/progress", json={"attempts": -1}).status_code == 400
    assert client.post("/api/progress", json={"userId": "nobody"}).status_code == 404
    assert client.post("/api/progress", json={"lessonId": 999}).status_code == 404


def test_record_progress_unknown_exercise(client):
    response = client.post("/api/progress", json={"userId": DEFAULT_USER["id"], "exerciseId": "missing"})
    assert response.status_code == 404
    assert client.get(f"/api/user/{DEFAULT_USER['id']}/progress/1").json() == []


def test_record_progress_for_exercise(client, storage):
    exercise = storage.get_exercises_by_lesson_id(1)[0]
    response = client.post("/api/progress", json={
        "userId": DEFAULT_USER["id"],
        "lessonId": 1,
        "exerciseId": exercise.id,
        "attempts": 1,
    })
    assert response.status_code == 200
    assert response.json()["exerciseId"] == exercise.id
