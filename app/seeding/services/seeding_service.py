import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from sqlalchemy import delete, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.exceptions import AssetReadError, SeedingError, SourceAbsentError, SourceFormatError
from app.country.models.country_model import Country
from app.country.services.country_service import CountryService
from app.competitions.models.competition_model import Competition
from app.competitions.services.competition_service import CompetitionService
from app.seeding.services.source_import_service import SourceImportService

logger = logging.getLogger(__name__)

SKIPPED_ABSENT = "skipped_absent"
SKIPPED_CURRENT = "skipped_current"
SEEDED = "seeded"


@dataclass
class SeedResult:
    status: str
    countries: int = 0
    competitions: int = 0


class SeedingService:
    """
    Keeps the store in step with the seeding CSV.

    Staleness is a row-count check: the store is considered current when it holds at
    least as many competitions as the source has rows. A source edited in place without
    changing its row count is not picked up.

    Clearing the tables and repopulating them happen in a single transaction, and all
    assets are read before the store is touched, so a failed run leaves the previous
    generation in place.
    """

    def __init__(self, db: Session, source_import_service: Optional[SourceImportService] = None):
        self.db = db
        self.source_import_service = source_import_service or SourceImportService()
        self.country_service = CountryService(db)
        self.competition_service = CompetitionService(db)

    def seed_if_stale(self, source_path, base_dir: Optional[Path] = None) -> SeedResult:
        try:
            rows = self.source_import_service.read_source(source_path)
        except SourceAbsentError as e:
            logger.warning(f"⚠ {e}. Skipping seed.")
            return SeedResult(status=SKIPPED_ABSENT)
        except SourceFormatError as e:
            logger.error(f"❌ Error during seeding: {e}")
            raise SeedingError(e) from e

        try:
            stored_count = self.competition_service.count_competitions()
            if stored_count >= len(rows):
                logger.info(f"⏭ Store already has data ({stored_count} >= {len(rows)}). Skipping seed.")
                self.db.rollback()
                return SeedResult(
                    status=SKIPPED_CURRENT,
                    countries=self.country_service.count_countries(),
                    competitions=stored_count,
                )

            logger.info(f"🔄 Store is stale ({stored_count} < {len(rows)}). Reading source assets...")
            imported = self.source_import_service.load_assets(rows, base_dir=base_dir)

            self._reset_store()
            logger.info("🧨 Tables cleared. Importing new generation...")

            country_cache = {}
            for item in imported:
                country_id = self.country_service.get_or_create_country(item.country, item.flag_blob, country_cache)
                self.competition_service.create_competition(
                    {
                        "name": item.competition,
                        "logo_blob": item.logo_blob,
                        "country_id": country_id,
                        "file_blob": item.file_blob,
                    }
                )
                logger.debug(f"   -> Imported: {item.competition} ({item.country})")

            self.db.commit()
        except (AssetReadError, SQLAlchemyError) as e:
            self.db.rollback()
            logger.error(f"❌ Error during seeding: {e}")
            raise SeedingError(e) from e

        logger.info(f"🚀 Seeding completed: {len(country_cache)} countries, {len(imported)} competitions.")
        return SeedResult(status=SEEDED, countries=len(country_cache), competitions=len(imported))

    def _reset_store(self):
        """Delete every competition, then every country, and restart both id sequences."""
        self.db.execute(delete(Competition))
        self.db.execute(delete(Country))

        has_sequences = self.db.execute(
            text("SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'sqlite_sequence'")
        ).first()
        if has_sequences:
            self.db.execute(text("DELETE FROM sqlite_sequence WHERE name IN ('competition', 'country')"))
