"""
End-to-end checks of the HTTP surface against the in-memory store.
"""


def test_root_status(client):
    response = client.get("/api/")

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["message"] == "API is up and running"
    assert body["time"].endswith("Z")


def test_root_status_without_trailing_slash(client):
    response = client.get("/api", follow_redirects=False)

    assert response.status_code == 200
    assert response.json()["ok"] is True


def test_list_books(client):
    body = client.get("/api/books").json()

    assert body["ok"] is True
    assert body["count"] == 2
    little_women = body["items"][0]
    assert little_women == {
        "id": "little-women",
        "title": "Little Women",
        "author": "Louisa May Alcott",
        "level": "Intermediate",
        "totalChapters": 30,
        "tags": ["Classic", "Family", "Coming-of-age"],
    }


def test_book_chapters(client):
    body = client.get("/api/books/anne-of-green-gables/chapters").json()

    assert body["book"]["id"] == "anne-of-green-gables"
    assert len(body["chapters"]) == 30
    assert body["chapters"][1] == {
        "id": "anne-of-green-gables-ch-2",
        "index": 2,
        "title": "Part 2",
        "estimatedMinutes": 15,
    }


def test_unknown_book_chapters(client):
    response = client.get("/api/books/moby-dick/chapters")

    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "Book not found"}


def test_reading_plan_defaults(client):
    plan = client.get("/api/reading-plan").json()["plan"]

    assert plan["bookId"] == "little-women"
    assert plan["sessionsPerWeek"] == 3
    assert plan["totalWeeks"] == 10
    assert plan["sessions"][3] == {"sessionIndex": 4, "weekIndex": 2, "chapterStart": 4, "chapterEnd": 4}


def test_reading_plan_clamps_cadence(client):
    plan = client.get("/api/reading-plan", params={"sessionsPerWeek": "20"}).json()["plan"]

    assert plan["sessionsPerWeek"] == 7
    assert plan["totalWeeks"] == 5


def test_reading_plan_unknown_book(client):
    response = client.get("/api/reading-plan", params={"bookId": "nope"})

    assert response.status_code == 404
    assert response.json()["ok"] is False


def test_unmatched_route(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {
        "ok": False,
        "error": "Not found",
        "path": "/does-not-exist",
        "method": "GET",
    }


def test_unsupported_method_is_not_found(client):
    response = client.delete("/api/words")

    assert response.status_code == 404
    assert response.json()["method"] == "DELETE"


def test_options_short_circuits(client):
    response = client.options("/api/progress/complete")

    assert response.status_code == 204
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]


def test_cors_header_on_simple_request(client):
    response = client.get("/api/books", headers={"Origin": "http://localhost:5173"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_malformed_json_body(client):
    response = client.post(
        "/api/progress/complete",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["ok"] is False


def test_complete_then_summary(client, fake_db, as_user):
    for index in (1, 2, 2):
        response = client.post(
            "/api/progress/complete",
            json={"bookId": "little-women", "trackId": "main", "segmentIndex": index, "timeSpentMinutes": 15},
            headers=as_user(),
        )
        assert response.status_code == 200
        assert response.json()["segmentIndex"] == index

    summary = client.get(
        "/api/progress/summary",
        params={"bookId": "little-women", "trackId": "main"},
        headers=as_user(),
    ).json()

    assert summary == {
        "ok": True,
        "bookId": "little-women",
        "trackId": "main",
        "totalChapters": 30,
        "completedCount": 2,
        "completionRate": 2 / 30,
        "lastCompletedSegment": 2,
    }
    log = next(iter(fake_db.docs("studyLogs").values()))
    assert log["uid"] == "u1"
    assert log["totalSegmentsCompleted"] == 3
    assert log["totalStudyMinutes"] == 45


def test_complete_requires_fields(client):
    response = client.post("/api/progress/complete", json={"bookId": "little-women", "trackId": "main"})

    assert response.status_code == 400
    assert response.json()["ok"] is False


def test_complete_rejects_segment_zero(client, fake_db):
    response = client.post(
        "/api/progress/complete",
        json={"bookId": "little-women", "trackId": "main", "segmentIndex": 0},
    )

    assert response.status_code == 400
    assert fake_db.docs("userProgress") == {}


def test_summary_requires_params(client):
    response = client.get("/api/progress/summary", params={"bookId": "little-women"})

    assert response.status_code == 400


def test_missing_user_header_uses_demo_user(client, fake_db):
    client.post(
        "/api/progress/complete",
        json={"bookId": "little-women", "trackId": "main", "segmentIndex": 1},
        headers={"x-user-id": "   "},
    )

    assert list(fake_db.docs("userProgress")) == ["demo-user_little-women_main_1"]


def test_empty_calendar(client):
    response = client.get("/api/progress/calendar", params={"month": "2024-02"})

    assert response.json() == {"ok": True, "month": "2024-02", "count": 0, "items": []}


def test_calendar_storage_error(client, fake_db):
    fake_db.fail("studyLogs", "query", "index missing")

    response = client.get("/api/progress/calendar", params={"month": "2024-02"})

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "index missing"}


def test_storage_error_without_message_uses_default(client, fake_db):
    fake_db.fail("studyLogs", "query", "")

    response = client.get("/api/progress/calendar")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to load calendar data"


def test_calendar_pads_single_digit_month(client):
    response = client.get("/api/progress/calendar", params={"month": "2024-2"})

    assert response.json()["month"] == "2024-02"


def test_complete_truncates_fractional_segment(client, fake_db):
    response = client.post(
        "/api/progress/complete",
        json={"bookId": "little-women", "trackId": "main", "segmentIndex": "2.7"},
    )

    assert response.json()["segmentIndex"] == 2
    assert list(fake_db.docs("userProgress")) == ["demo-user_little-women_main_2"]
