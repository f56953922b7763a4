"""Menu endpoint: vocabularies the order form is built from."""

from fastapi import APIRouter, Depends

from core.application.dtos.menu_dto import MenuDTO
from core.application.services.order_service import OrderApplicationService

from apps.api.deps import get_order_service

router = APIRouter(prefix="/menu", tags=["menu"])


@router.get("", response_model=MenuDTO)
async def get_menu(
    service: OrderApplicationService = Depends(get_order_service),
) -> MenuDTO:
    """Pizza types, sizes, crusts, toppings, defaults, dietary requirements and allergies."""
    return service.get_order_form()
