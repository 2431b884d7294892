from fastapi import APIRouter, Depends, HTTPException, status

from contentdesk.api.deps import get_controller, get_current_user
from contentdesk.api.schemas import LoginRequest
from contentdesk.app_shell.controller import DashboardController
from contentdesk.domain.entities import Notification, User
from contentdesk.domain.errors import UnauthorizedError

router = APIRouter()


@router.post("/login", response_model=User)
def login(
    req: LoginRequest,
    controller: DashboardController = Depends(get_controller),
) -> User:
    try:
        return controller.login(req.email)
    except UnauthorizedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e


@router.post("/logout")
def logout(controller: DashboardController = Depends(get_controller)) -> dict[str, str]:
    controller.logout()
    return {"message": "Logged out"}


@router.get("/me", response_model=User)
def me(current_user: User = Depends(get_current_user)) -> User:
    return current_user


@router.get("/notification", response_model=Notification | None)
def current_notification(
    controller: DashboardController = Depends(get_controller),
) -> Notification | None:
    """The single in-flight notification, if any."""
    return controller.notification


@router.delete("/notification")
def dismiss_notification(
    controller: DashboardController = Depends(get_controller),
) -> dict[str, str]:
    controller.emitter.dismiss()
    return {"message": "Dismissed"}
