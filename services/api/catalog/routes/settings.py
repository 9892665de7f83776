"""Site settings endpoints (order phone number)."""

from fastapi import APIRouter, Depends

from catalog.routes.deps import get_store
from catalog.schemas import ErrorResponse, PhoneNumberBody, PhoneNumberResponse, PhoneNumberUpdated
from catalog.services.site_settings import SettingsService
from catalog.stores.cache import CatalogStore

router = APIRouter()


def get_service(store: CatalogStore = Depends(get_store)) -> SettingsService:
    return SettingsService(store)


@router.get("/phone", response_model=PhoneNumberResponse)
async def get_phone(service: SettingsService = Depends(get_service)) -> PhoneNumberResponse:
    return PhoneNumberResponse(phone_number=service.get_phone())


@router.put(
    "/phone",
    response_model=PhoneNumberUpdated,
    responses={400: {"model": ErrorResponse, "description": "phoneNumber missing"}},
)
async def update_phone(
    body: PhoneNumberBody | None = None,
    service: SettingsService = Depends(get_service),
) -> PhoneNumberUpdated:
    phone_number = await service.set_phone(body)
    return PhoneNumberUpdated(message="Phone number updated", phone_number=phone_number)
