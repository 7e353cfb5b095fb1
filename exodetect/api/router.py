from fastapi import APIRouter
from exodetect.api.v1.endpoints import analysis

api_router = APIRouter(prefix="/v1")

api_router.include_router(
    analysis.router,
    prefix="/analysis",
    tags=["Analysis"]
)
