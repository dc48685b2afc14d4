import logging
from sqlalchemy.orm import Session
from sqlalchemy.dialects.sqlite import insert
from app.country.models.country_model import Country

logger = logging.getLogger(__name__)

class CountryService:
    def __init__(self, db: Session):
        self.db = db

    def get_or_create_country(self, country_name: str, flag_blob: bytes, cache: dict) -> int:
        """Resolve a country id by name, inserting the country on its first occurrence in a run."""
        if country_name in cache:
            return cache[country_name]

        # A name left behind by an earlier partial state must not fail the run
        self.db.execute(
            insert(Country)
            .values(name=country_name, flag_blob=flag_blob)
            .on_conflict_do_nothing(index_elements=["name"])
        )
        country_id = self.db.query(Country.id).filter(Country.name == country_name).scalar()

        cache[country_name] = country_id
        return country_id

    def list_countries(self):
        """Fetch every country with its flag, ordered by name."""
        rows = self.db.query(Country.id, Country.name, Country.flag_blob).order_by(Country.name.asc()).all()
        return [{"id": row.id, "name": row.name, "flag_blob": row.flag_blob or b""} for row in rows]

    def count_countries(self) -> int:
        return self.db.query(Country).count()
