from config import settings

VALID_SUBMISSION = {
    "food_type": "Bread & Bakery",
    "quantity": 7.5,
    "unit": "items",
    "location": "Hotel Grand, service entrance",
    "event_type": "Hotel Buffet",
    "notes": None,
    "status": "available",
}

def test_create_submission(client):
    response = client.post("/api/v1/submissions", json=VALID_SUBMISSION)

    assert response.status_code == 201
    body = response.json()
    assert body["food_type"] == "Bread & Bakery"
    assert body["quantity"] == 7.5
    assert body["status"] == "available"
    assert "id" in body and "created_at" in body

def test_create_submission_blank_required_field(client):
    response = client.post("/api/v1/submissions", json={**VALID_SUBMISSION, "location": "  "})

    assert response.status_code == 400
    assert "location" in response.json()["detail"]
    assert client.get("/api/v1/submissions/recent").json() == []

def test_create_submission_absent_field_rejected(client):
    payload = {k: v for k, v in VALID_SUBMISSION.items() if k != "food_type"}

    response = client.post("/api/v1/submissions", json=payload)

    assert response.status_code == 422

def test_recent_submissions_newest_first_and_capped(client):
    for index in range(12):
        client.post("/api/v1/submissions", json={**VALID_SUBMISSION, "food_type": f"Batch {index}"})

    response = client.get("/api/v1/submissions/recent", params={"limit": 50})

    assert response.status_code == 200
    rows = response.json()
    assert len(rows) == 10
    assert rows[0]["food_type"] == "Batch 11"
    assert rows[-1]["food_type"] == "Batch 2"

def test_database_failure_surfaces_generic_error(client, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DB_PATH", str(tmp_path / "gone" / "absent.db"))

    response = client.post("/api/v1/submissions", json=VALID_SUBMISSION)

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to submit food data"

def test_insert_is_published_to_subscribers(client):
    from services.realtime_service import broadcaster

    queue = broadcaster.subscribe()
    try:
        client.post("/api/v1/submissions", json=VALID_SUBMISSION)
        notification = queue.get_nowait()
    finally:
        broadcaster.unsubscribe(queue)

    assert notification["event"] == "INSERT"
    assert notification["table"] == "food_submissions"
    assert notification["new"]["location"] == VALID_SUBMISSION["location"]

def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}

class StubRequest:
    def __init__(self):
        self.disconnected = False

    async def is_disconnected(self):
        return self.disconnected

def test_stream_sends_keepalive_insert_and_unsubscribes(db_path, monkeypatch):
    import asyncio

    from models.submission import FoodSubmissionCreate
    from routers import submissions
    from services.realtime_service import broadcaster

    monkeypatch.setattr(submissions, "KEEPALIVE_SECONDS", 0.01)
    initial_count = broadcaster.subscriber_count

    async def run():
        request = StubRequest()
        events = submissions.submission_events(request)

        keepalive = await events.__anext__()
        subscribed = broadcaster.subscriber_count

        await submissions.create_submission(FoodSubmissionCreate(**VALID_SUBMISSION))
        insert_frame = await events.__anext__()

        request.disconnected = True
        try:
            await events.__anext__()
            finished = False
        except StopAsyncIteration:
            finished = True

        return keepalive, subscribed, insert_frame, finished

    keepalive, subscribed, insert_frame, finished = asyncio.run(run())

    assert keepalive == ": keepalive\n\n"
    assert subscribed == initial_count + 1
    assert insert_frame.startswith("event: INSERT\ndata: ")
    assert VALID_SUBMISSION["location"] in insert_frame
    assert finished
    assert broadcaster.subscriber_count == initial_count

def test_stream_route_does_not_subscribe_before_iteration(db_path):
    import asyncio

    from routers import submissions
    from services.realtime_service import broadcaster

    initial_count = broadcaster.subscriber_count

    response = asyncio.run(submissions.stream_submissions(StubRequest()))

    assert response.media_type == "text/event-stream"
    assert broadcaster.subscriber_count == initial_count
