from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import httpx
import json
import logging

from models.prediction import PredictionRequest, PredictionResult, ErrorResponse
from services.prediction_service import predict_demand, get_gateway_client, PredictionError

router = APIRouter(
    prefix="/functions",
    tags=["Functions"],
    responses={
        402: {"model": ErrorResponse, "description": "AI credits exhausted"},
        429: {"model": ErrorResponse, "description": "AI gateway rate limit"},
        500: {"model": ErrorResponse, "description": "Prediction failed"},
    },
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["event_type", "expected_attendees", "day_of_week"]

@router.post("/predict-demand", response_model=PredictionResult, summary="AI food demand forecast")
async def predict_demand_function(request: Request, client: httpx.AsyncClient = Depends(get_gateway_client)):
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(status_code=400, content={"error": "Request body must be JSON"})

    if not isinstance(body, dict):
        return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object"})

    missing = [field for field in REQUIRED_FIELDS if body.get(field) in (None, "")]
    if missing:
        return JSONResponse(
            status_code=400,
            content={"error": f"Missing required fields: {', '.join(missing)}"}
        )

    prediction_request = PredictionRequest(**{field: body[field] for field in REQUIRED_FIELDS})

    try:
        prediction = await predict_demand(prediction_request, client)
    except PredictionError as e:
        logger.error(f"Prediction error: {e.message}")
        return JSONResponse(status_code=e.status_code, content={"error": e.message})

    # Returned verbatim, not coerced through PredictionResult
    return JSONResponse(content=prediction)
