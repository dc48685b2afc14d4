from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import get_db
from app.core.exceptions import CompetitionNotFoundError, DiskIOError, EmptyPayloadError
from app.install.services.install_service import InstallService

router = APIRouter()


def get_install_target() -> str:
    return settings.INSTALL_TARGET_PATH


@router.post("/{competition_id}/install")
def install_competition(
    competition_id: int,
    db: Session = Depends(get_db),  # Holds the store lock until the file is written
    target_path: str = Depends(get_install_target),
):
    """Write the competition's scoreboard file to the configured install target."""
    try:
        result = InstallService(db).install(competition_id, target_path)
    except CompetitionNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except EmptyPayloadError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except DiskIOError as e:
        raise HTTPException(status_code=500, detail=e.message)

    return {"message": "Scoreboard installed successfully", "path": str(result.path), "size": result.size}


@router.delete("/installed")
def remove_current_scoreboard(
    db: Session = Depends(get_db),
    target_path: str = Depends(get_install_target),
):
    """Remove the installed scoreboard so the game falls back to its original one."""
    try:
        removed = InstallService(db).uninstall(target_path)
    except DiskIOError as e:
        raise HTTPException(status_code=500, detail=e.message)

    if not removed:
        return {"message": "No custom scoreboard installed, original already in use"}
    return {"message": "Original scoreboard restored"}
