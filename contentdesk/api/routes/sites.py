from fastapi import APIRouter, Depends

from contentdesk.api.deps import get_controller, get_current_user
from contentdesk.api.schemas import SiteCreateRequest, SiteResponse, SiteUpdateRequest
from contentdesk.app_shell.controller import DashboardController
from contentdesk.domain.entities import Site, User

router = APIRouter()


def _to_response(site: Site) -> SiteResponse:
    return SiteResponse(
        id=site.id,
        url=site.url,
        name=site.name,
        username=site.username,
        stats=site.stats,
        is_virtual=site.is_virtual,
    )


@router.get("", response_model=list[SiteResponse])
def list_sites(
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> list[SiteResponse]:
    return [_to_response(s) for s in controller.state.sites]


@router.post("", response_model=SiteResponse)
def add_site(
    req: SiteCreateRequest,
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> SiteResponse:
    site = controller.add_site(
        req.url,
        username=req.username,
        app_password=req.app_password,
        name=req.name,
        is_virtual=req.is_virtual,
    )
    return _to_response(site)


# Site ids are URL origins, so they travel as a query parameter.
@router.patch("", response_model=SiteResponse)
def update_site(
    site_id: str,
    req: SiteUpdateRequest,
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> SiteResponse:
    site = controller.update_site(site_id, req.model_dump(exclude_none=True))
    return _to_response(site)


@router.delete("")
def remove_site(
    site_id: str,
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> dict[str, str]:
    controller.remove_site(site_id)
    return {"message": "Site removed"}
