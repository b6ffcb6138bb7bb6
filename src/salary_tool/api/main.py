"""
Salary API - FastAPI transport for the salary engine.

The predict endpoint reads the raw body itself so malformed JSON and
missing fields produce the two distinct 400 messages clients rely on.
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config.settings import get_settings
from ..engine import predict_salary
from ..engine.errors import SalaryToolError
from ..engine.tables import CURRENCY, EDUCATION_LEVELS, LOCATION_TIERS, ROLES, USD_TO_INR
from ..utils.logger import get_logger
from .payload import parse_body, profile_from_payload

settings = get_settings()
logger = get_logger(__name__)

app = FastAPI(
    title="Salary Predictor API",
    description="Backend API for the Employee Salary Predictor",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class BreakdownResponse(BaseModel):
    baseByRole: int
    experienceAdjustment: int
    locationAdjustment: int
    educationAdjustment: int
    skillsAdjustment: int


class PredictionResponse(BaseModel):
    """Response model for a salary prediction."""
    currency: str
    low: int
    high: int
    expected: int
    breakdown: BreakdownResponse


class ErrorResponse(BaseModel):
    error: str


class OptionsResponse(BaseModel):
    """Enumerations for populating selection controls."""
    roles: list[str]
    location_tiers: list[str]
    education_levels: list[str]
    currency: str
    usd_to_inr: float


@app.exception_handler(SalaryToolError)
async def salary_error_handler(request: Request, exc: SalaryToolError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.get("/")
async def root():
    return {"status": "online", "message": "Salary Predictor API Active"}


@app.get("/api/options", response_model=OptionsResponse)
async def get_options():
    return OptionsResponse(
        roles=list(ROLES),
        location_tiers=list(LOCATION_TIERS),
        education_levels=list(EDUCATION_LEVELS),
        currency=CURRENCY,
        usd_to_inr=USD_TO_INR,
    )


@app.post(
    "/api/predict",
    response_model=PredictionResponse,
    responses={400: {"model": ErrorResponse}},
)
async def predict(request: Request):
    """Estimate a salary range for the profile in the request body."""
    body = parse_body(await request.body())
    profile = profile_from_payload(body)
    result = predict_salary(profile)
    logger.info("Predicted %s %s for %s", result.expected, result.currency, profile.role)
    return result.to_dict()
