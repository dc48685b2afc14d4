from typing import Optional
from sqlalchemy.orm import Session
from app.competitions.models.competition_model import Competition

class CompetitionService:
    def __init__(self, db: Session):
        self.db = db

    def create_competition(self, competition_data: dict) -> Competition:
        """Add a competition to the current transaction. The caller commits."""
        competition = Competition(
            name=competition_data["name"],
            logo_blob=competition_data.get("logo_blob"),
            country_id=competition_data["country_id"],
            file_blob=competition_data.get("file_blob"),
        )
        self.db.add(competition)
        self.db.flush()
        return competition

    def list_by_country(self, country_id: int):
        """Competitions of one country ordered by name. The installable payload is never selected."""
        rows = (
            self.db.query(Competition.id, Competition.name, Competition.logo_blob)
            .filter(Competition.country_id == country_id)
            .order_by(Competition.name.asc())
            .all()
        )
        return [{"id": row.id, "name": row.name, "logo_blob": row.logo_blob or b""} for row in rows]

    def count_competitions(self) -> int:
        return self.db.query(Competition).count()

    def get_payload(self, competition_id: int) -> Optional[bytes]:
        """
        Fetch the installable payload of a competition.

        Returns None when no competition has this id. A stored NULL comes back as b"".
        """
        row = self.db.query(Competition.file_blob).filter(Competition.id == competition_id).first()
        if row is None:
            return None
        return row.file_blob or b""
