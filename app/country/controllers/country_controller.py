from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.utils import encode_blob
from app.country.services.country_service import CountryService
from app.competitions.services.competition_service import CompetitionService

router = APIRouter()


@router.get("/")
def get_countries(db: Session = Depends(get_db)):
    """
    List every country with its flag (base64), ordered by name.
    """
    countries = CountryService(db).list_countries()
    return [
        {"id": country["id"], "name": country["name"], "flag_blob": encode_blob(country["flag_blob"])}
        for country in countries
    ]


@router.get("/{country_id}/competitions")
def get_competitions_by_country(country_id: int, db: Session = Depends(get_db)):
    """
    List the competitions of a country with their logos (base64), ordered by name.
    An unknown country yields an empty list.
    """
    competitions = CompetitionService(db).list_by_country(country_id)
    return [
        {"id": competition["id"], "name": competition["name"], "logo_blob": encode_blob(competition["logo_blob"])}
        for competition in competitions
    ]
