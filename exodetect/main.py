from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from exodetect import __version__
from exodetect.api.router import api_router
from exodetect.settings import settings
import logging


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(
        title="ExoDetect Transit Analysis API",
        description="""
    **Classification of candidate exoplanet transit signals**

    Submit the five transit measurements together with a missing data
    strategy, a normalization strategy and a model type.

    ## **Pipeline:**
    - Input validation
    - Feature engineering
    - Classification (Confirmed Exoplanet, Planetary Candidate, False Positive)
    - Explanation (SHAP values or feature importance)
    - Historical performance summary

    ## **Available Endpoints:**
    - **`/api/v1/analysis/`** - Run the analysis pipeline
    - **`/api/v1/analysis/options`** - Allowed selections
    - **`/api/v1/analysis/defaults`** - Default form values
    """,
        version=__version__,
        debug=settings.debug,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url="/redoc" if settings.enable_redoc else None
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        return {
            "message": "ExoDetect Transit Analysis API running",
            "version": __version__,
            "status": "operational",
            "endpoints": {
                "analysis": "/api/v1/analysis/",
                "options": "/api/v1/analysis/options",
                "defaults": "/api/v1/analysis/defaults"
            },
            "documentation": "/docs" if settings.enable_docs else None
        }

    return app


app = create_app()
