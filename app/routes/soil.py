"""Soil health scoring route."""

from __future__ import annotations

from fastapi import APIRouter

from app.analytics.soil import score_components
from app.schemas.soil import SoilSampleIn, SoilScoreResponse

router = APIRouter(prefix="/soil", tags=["soil"])


@router.post("/score", response_model=SoilScoreResponse)
async def score_soil(payload: SoilSampleIn) -> SoilScoreResponse:
	score = score_components(
		ph=payload.ph,
		nitrogen=payload.nitrogen,
		phosphorus=payload.phosphorus,
		potassium=payload.potassium,
		organic_matter=payload.organic_matter,
	)
	return SoilScoreResponse(
		score=score.total,
		ph_score=score.ph_score,
		nutrient_score=score.nutrient_score,
		organic_score=score.organic_score,
	)
