from functools import lru_cache

from fastapi import Depends, HTTPException, status

from contentdesk.adapters.dev_generator import DevGenerator
from contentdesk.adapters.dev_publisher import DevPublisher
from contentdesk.adapters.sqlite_snapshot import SQLiteSnapshotStore
from contentdesk.app_shell.config import Settings, load_validated_rules
from contentdesk.app_shell.controller import DashboardController
from contentdesk.domain.entities import User
from contentdesk.rules.models import Rules


# --- Settings ---
@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_validated_rules(get_settings())


# --- Controller ---
# One controller per process: it owns the session and the workspace.
@lru_cache
def get_controller() -> DashboardController:
    settings = get_settings()
    return DashboardController.create(
        rules=get_rules(),
        snapshots=SQLiteSnapshotStore(settings.db_path),
        publisher=DevPublisher(),
        generator=DevGenerator(),
    )


# --- Auth ---
def get_current_user(
    controller: DashboardController = Depends(get_controller),
) -> User:
    user = controller.current_user
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return user
