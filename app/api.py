from fastapi import APIRouter
from app.country.controllers.country_controller import router as country_router
from app.competitions.controllers.install_controller import router as install_router

api_router = APIRouter()

api_router.include_router(country_router, prefix="/countries", tags=["countries"])
api_router.include_router(install_router, prefix="/competitions", tags=["competitions"])
