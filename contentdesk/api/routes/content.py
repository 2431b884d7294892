from datetime import date

from fastapi import APIRouter, Depends, Path

from contentdesk.api.deps import get_controller, get_current_user
from contentdesk.api.schemas import (
    AddItemsRequest,
    BulkScheduleRequest,
    BulkScheduleResponse,
    CalendarDayResponse,
    GenerateRequest,
    PublishRequest,
    PublishResponse,
    TransitionRequest,
)
from contentdesk.app_shell.controller import DashboardController
from contentdesk.components.publish import PublishOptions
from contentdesk.domain.entities import ContentItem, User

router = APIRouter()


@router.get("", response_model=list[ContentItem])
def list_content(
    type: str = "all",
    status: str = "all",
    q: str = "",
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> list[ContentItem]:
    """Filtered library view, in library order."""
    return controller.query(type_filter=type, status_filter=status, search_text=q)


@router.post("", response_model=list[ContentItem])
def add_content(
    req: AddItemsRequest,
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> list[ContentItem]:
    return controller.add_to_library(req.items)


@router.post("/generate", response_model=ContentItem)
async def generate_content(
    req: GenerateRequest,
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> ContentItem:
    return await controller.generate(req.kind, req.params)


@router.post("/bulk-schedule", response_model=BulkScheduleResponse)
def bulk_schedule(
    req: BulkScheduleRequest,
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> BulkScheduleResponse:
    count = controller.schedule_batch(req.item_ids, req.start, req.interval_days)
    return BulkScheduleResponse(count=count)


@router.get("/calendar/day/{day}", response_model=list[ContentItem])
def calendar_day(
    day: date,
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> list[ContentItem]:
    return controller.items_for_day(day)


@router.get("/calendar/{year}/{month}", response_model=list[CalendarDayResponse])
def calendar(
    year: int = Path(ge=1, le=9999),
    month: int = Path(ge=1, le=12),
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> list[CalendarDayResponse]:
    return [
        CalendarDayResponse(day=d.day, in_month=d.in_month, items=d.items)
        for d in controller.calendar_month(year, month)
    ]


@router.get("/{item_id}", response_model=ContentItem)
def get_content(
    item_id: str,
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> ContentItem:
    return controller.get_item(item_id)


@router.post("/{item_id}/transition", response_model=ContentItem)
def transition_content(
    item_id: str,
    req: TransitionRequest,
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> ContentItem:
    return controller.request_transition(item_id, req.to_status)


@router.post("/{item_id}/publish", response_model=PublishResponse)
async def publish_content(
    item_id: str,
    req: PublishRequest,
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> PublishResponse:
    options = PublishOptions(
        categories=list(req.categories),
        remote_status=req.remote_status,
        action=req.action,
        post_id=req.post_id,
    )
    out = await controller.publish(item_id, req.site_id, options)
    return PublishResponse(
        external_post_id=out.result.external_post_id,
        external_url=out.result.external_url,
        item=out.item,
    )


@router.delete("/{item_id}")
def delete_content(
    item_id: str,
    current_user: User = Depends(get_current_user),
    controller: DashboardController = Depends(get_controller),
) -> dict[str, str]:
    controller.delete_item(item_id)
    return {"message": "Content deleted"}
