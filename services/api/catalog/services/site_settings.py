"""Site settings service (the singleton settings document)."""

from catalog.schemas.catalog import PhoneNumberBody
from catalog.services.errors import BadRequestError
from catalog.stores.cache import CatalogStore


class SettingsService:
    def __init__(self, store: CatalogStore):
        self.store = store

    def get_phone(self) -> str | None:
        return self.store.read().settings.phone_number

    async def set_phone(self, body: PhoneNumberBody | None) -> str | None:
        """Replace the order phone number.

        Raises:
            BadRequestError: If the body has no `phoneNumber` key. An empty
                string or null is stored as given.
        """
        if body is None or "phone_number" not in body.model_fields_set:
            raise BadRequestError("Phone number is required", detail={"field": "phoneNumber"})

        async with self.store.mutate() as snapshot:
            snapshot.settings.phone_number = body.phone_number
            return snapshot.settings.phone_number
