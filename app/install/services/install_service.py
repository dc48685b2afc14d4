import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from sqlalchemy.orm import Session
from app.core.exceptions import CompetitionNotFoundError, DiskIOError, EmptyPayloadError
from app.competitions.services.competition_service import CompetitionService

logger = logging.getLogger(__name__)


@dataclass
class InstallResult:
    path: Path
    size: int


class InstallService:
    def __init__(self, db: Session):
        self.db = db
        self.competition_service = CompetitionService(db)

    def install(self, competition_id: int, target_path) -> InstallResult:
        """
        Write a competition's stored payload to the install target, replacing whatever is there.

        The payload goes to a temporary file next to the target and is renamed into place,
        so an interrupted write never leaves a truncated target behind.
        """
        logger.info(f"🔍 Install requested for competition ID {competition_id}")

        payload = self.competition_service.get_payload(competition_id)
        if payload is None:
            raise CompetitionNotFoundError(competition_id)

        logger.info(f"📦 Payload found. Size: {len(payload)} bytes")
        if not payload:
            raise EmptyPayloadError(competition_id)

        target = Path(target_path)
        logger.info(f"📂 Writing to: {target}")

        try:
            if not target.parent.exists():
                logger.info(f"📁 Creating folders: {target.parent}")
                target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"❌ Could not create folders for {target}: {e}")
            raise DiskIOError(target.parent, e) from e

        self._write_replacing(target, payload)
        logger.info(f"✅ Installed competition {competition_id} at {target}")
        return InstallResult(path=target, size=len(payload))

    def uninstall(self, target_path) -> bool:
        """Remove the installed file so the original asset is used again. False when nothing was installed."""
        target = Path(target_path)
        if not target.exists():
            logger.info(f"⏭ Nothing installed at {target}")
            return False

        try:
            target.unlink()
        except OSError as e:
            logger.error(f"❌ Could not remove {target}: {e}")
            raise DiskIOError(target, e) from e

        logger.info(f"🧹 Removed installed file {target}")
        return True

    def _write_replacing(self, target: Path, payload: bytes):
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as tmp_file:
                tmp_file.write(payload)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            os.replace(tmp_path, target)
        except OSError as e:
            logger.error(f"❌ Write failed for {target}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise DiskIOError(target, e) from e
