import json
import logging
from typing import Any, Dict

import httpx

from config import settings
from models.prediction import PredictionRequest

logger = logging.getLogger(__name__)

TOOL_NAME = "food_demand_prediction"

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
CREDITS_EXHAUSTED_MESSAGE = "AI credits exhausted. Please add credits."

PREDICTION_TOOL = {
    "type": "function",
    "function": {
        "name": TOOL_NAME,
        "description": "Return the food demand prediction with recommendations",
        "parameters": {
            "type": "object",
            "properties": {
                "predicted_demand": {
                    "type": "number",
                    "description": "Total predicted food demand in kg"
                },
                "confidence": {
                    "type": "number",
                    "description": "Confidence level 0-100"
                },
                "recommendations": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "List of 3 actionable recommendations"
                }
            },
            "required": ["predicted_demand", "confidence", "recommendations"],
            "additionalProperties": False
        }
    }
}

class PredictionError(Exception):
    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

def build_system_prompt() -> str:
    return (
        "You are an AI assistant specialized in food demand prediction for events.\n"
        "Based on historical patterns and the provided parameters, predict the amount of food (in kg) that will be needed.\n"
        "\n"
        "Consider these factors:\n"
        "- Event type affects portion sizes and food variety\n"
        "- Day of week affects attendance patterns (weekends typically have more attendance)\n"
        "- Historical averages: Weddings ~0.8kg/person, Corporate ~0.5kg/person, "
        "Conferences ~0.4kg/person, Buffets ~0.6kg/person\n"
        "\n"
        "Return a JSON object with:\n"
        "- predicted_demand: number (total kg of food needed)\n"
        "- confidence: number (0-100, your confidence in the prediction)\n"
        "- recommendations: array of 3 actionable recommendations to reduce waste"
    )

def build_user_prompt(event_type: str, expected_attendees: Any, day_of_week: str) -> str:
    return (
        "Predict food demand for:\n"
        f"- Event type: {event_type}\n"
        f"- Expected attendees: {expected_attendees}\n"
        f"- Day of week: {day_of_week}\n"
        "\n"
        "Provide your prediction as JSON."
    )

def build_gateway_payload(request: PredictionRequest) -> Dict[str, Any]:
    return {
        "model": settings.AI_MODEL,
        "messages": [
            {"role": "system", "content": build_system_prompt()},
            {
                "role": "user",
                "content": build_user_prompt(
                    request.event_type,
                    request.expected_attendees,
                    request.day_of_week
                )
            }
        ],
        "tools": [PREDICTION_TOOL],
        "tool_choice": {"type": "function", "function": {"name": TOOL_NAME}}
    }

def extract_prediction(data: Dict[str, Any]) -> Dict[str, Any]:
    """Pull the forced tool call out of a chat-completion response.

    The arguments are returned as decoded, without reshaping, so the caller
    sees exactly what the model produced for the tool schema.
    """
    try:
        tool_call = data["choices"][0]["message"]["tool_calls"][0]
    except (KeyError, IndexError, TypeError):
        tool_call = None

    if not tool_call:
        raise PredictionError("No tool call in response")

    try:
        prediction = json.loads(tool_call["function"]["arguments"])
    except (KeyError, TypeError, ValueError) as e:
        raise PredictionError(f"Invalid tool call arguments: {str(e)}") from e

    if not isinstance(prediction, dict):
        raise PredictionError("Invalid tool call arguments: expected a JSON object")

    return prediction

async def predict_demand(request: PredictionRequest, client: httpx.AsyncClient) -> Dict[str, Any]:
    logger.info(
        f"Prediction request: event_type={request.event_type} "
        f"expected_attendees={request.expected_attendees} day_of_week={request.day_of_week}"
    )

    api_key = settings.LOVABLE_API_KEY
    if not api_key:
        raise PredictionError("LOVABLE_API_KEY is not configured")

    try:
        response = await client.post(
            settings.AI_GATEWAY_URL,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json"
            },
            json=build_gateway_payload(request)
        )
    except httpx.HTTPError as e:
        logger.error(f"AI gateway unreachable: {str(e)}")
        raise PredictionError(f"AI gateway unreachable: {str(e)}") from e

    if not response.is_success:
        logger.error(f"AI Gateway error: {response.status_code} {response.text}")

        if response.status_code == 429:
            raise PredictionError(RATE_LIMIT_MESSAGE, 429)
        if response.status_code == 402:
            raise PredictionError(CREDITS_EXHAUSTED_MESSAGE, 402)

        raise PredictionError(f"AI gateway error: {response.status_code}")

    try:
        data = response.json()
    except ValueError as e:
        raise PredictionError("AI gateway returned invalid JSON") from e

    logger.info(f"AI response: {json.dumps(data)}")

    return extract_prediction(data)

async def get_gateway_client():
    async with httpx.AsyncClient(timeout=settings.AI_GATEWAY_TIMEOUT) as client:
        yield client
