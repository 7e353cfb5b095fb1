from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import JSONResponse
from exodetect.exceptions import PipelineError, ValidationError
from exodetect.schemas import (
    AnalysisOptions, MissingDataStrategy, ModelType, NormalizationStrategy,
    PipelineResult, ValidationErrorResponse
)
from exodetect.services import AnalysisPipeline, get_pipeline

router = APIRouter()

DEFAULT_FORM = {
    "orbitalPeriod": 11.8,
    "transitDuration": 0.1,
    "planetaryRadius": 0.8,
    "transitDepth": 689.0,
    "snr": 45.8,
    "missingDataStrategy": MissingDataStrategy.MEAN.value,
    "normalizationStrategy": NormalizationStrategy.MINMAX.value,
    "modelType": ModelType.RANDOM_FOREST.value,
}


@router.post(
    "/",
    response_model=PipelineResult,
    responses={422: {"model": ValidationErrorResponse}}
)
async def run_analysis(
    form: Dict[str, Any] = Body(..., examples=[DEFAULT_FORM]),
    pipeline: AnalysisPipeline = Depends(get_pipeline)
):
    """
    Classify a candidate transit signal.

    Runs the submitted measurements through feature engineering, the
    classifier, the explainer and the performance reporter and returns:
    - Engineered features and the steps taken
    - Predicted class and confidence
    - Feature attributions and rationale
    - Historical model performance
    """
    try:
        return await pipeline.run(form)

    except ValidationError as e:
        return JSONResponse(
            status_code=422,
            content={"detail": e.message, "errors": e.errors}
        )
    except PipelineError as e:
        raise HTTPException(status_code=500, detail=e.message)


@router.get("/options", response_model=AnalysisOptions)
async def get_options():
    """Allowed values of the strategy and model selections"""
    return AnalysisOptions(
        missing_data_strategies=[item.value for item in MissingDataStrategy],
        normalization_strategies=[item.value for item in NormalizationStrategy],
        model_types=[item.value for item in ModelType]
    )


@router.get("/defaults")
async def get_defaults():
    """Default form record"""
    return DEFAULT_FORM
