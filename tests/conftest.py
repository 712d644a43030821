import json

import httpx
import pytest
from fastapi.testclient import TestClient

from config import settings
from database_schema import create_database
from main import app
from services.foodrescue_client import FoodRescueClient
from services.prediction_service import get_gateway_client

WEDDING_PREDICTION = {
    "predicted_demand": 160,
    "confidence": 85,
    "recommendations": [
        "Prepare 0.8kg per guest with a 10% buffer",
        "Book an NGO pickup for the end of the reception",
        "Serve desserts in smaller portions",
    ],
}

def gateway_completion(arguments) -> dict:
    return {
        "id": "chatcmpl-test",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [
                        {
                            "id": "call_1",
                            "type": "function",
                            "function": {
                                "name": "food_demand_prediction",
                                "arguments": arguments if isinstance(arguments, str) else json.dumps(arguments),
                            },
                        }
                    ],
                },
                "finish_reason": "tool_calls",
            }
        ],
    }

@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = str(tmp_path / "foodrescue.db")
    monkeypatch.setattr(settings, "DB_PATH", path)
    create_database(path)
    return path

@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "LOVABLE_API_KEY", "test-key")
    return "test-key"

@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

@pytest.fixture
def api(client):
    return FoodRescueClient(client, base_path="/api/v1")

@pytest.fixture
def gateway(api_key):
    """Route gateway calls made by the app to a mock handler.

    Returns a setter taking ``handler(request) -> httpx.Response``; every
    request seen by the mock is appended to the returned list.
    """
    calls = []

    def use(handler):
        def recording_handler(request):
            calls.append(request)
            return handler(request)

        async def override():
            async with httpx.AsyncClient(transport=httpx.MockTransport(recording_handler)) as gateway_client:
                yield gateway_client

        app.dependency_overrides[get_gateway_client] = override
        return calls

    yield use
    app.dependency_overrides.clear()
