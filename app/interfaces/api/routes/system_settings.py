"""Routes for the application-wide settings and maintenance mode."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.system_settings import (
    get_system_settings as get_system_settings_uc,
    update_system_settings as update_system_settings_uc,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import require_admin
from app.interfaces.api.schemas import (
    MaintenanceStatusRead,
    SystemSettingsRead,
    SystemSettingsUpdate,
)

router = APIRouter(prefix="/system-settings", tags=["system-settings"])


@router.get("/maintenance", response_model=MaintenanceStatusRead)
def read_maintenance_status(db: Session = Depends(get_db)):
    """Return whether maintenance mode is on and the message shown to users."""

    settings = get_system_settings_uc(db)
    return MaintenanceStatusRead(
        maintenance_mode=settings.maintenance_mode,
        maintenance_message=settings.maintenance_message,
    )


@router.get("/", response_model=SystemSettingsRead)
def read_system_settings(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    return get_system_settings_uc(db)


@router.put("/", response_model=SystemSettingsRead)
def update_system_settings(
    payload: SystemSettingsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Toggle maintenance mode or change its message."""

    try:
        return update_system_settings_uc(
            db,
            user=current_user,
            maintenance_mode=payload.maintenance_mode,
            maintenance_message=payload.maintenance_message,
        )
    except PermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
