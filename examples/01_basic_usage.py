"""
Basic usage example of request-state.

Demonstrates:
- One RequestState per logical request
- Guarding a request whose parameter is missing
- Re-triggering every request when the selected apartment changes
"""

import asyncio

import httpx

from request_state import RequestState, use_request

API_URL = "https://api.example.com"


class ApartmentPage:
    """Holds the request state a detail view renders from."""

    def __init__(self, client: httpx.AsyncClient, apartment_id: str | None) -> None:
        self.client = client
        self.apartment_id = apartment_id

        # Disabled declaratively until an apartment is selected
        self.apartment_info: RequestState = use_request(
            self._get_apartment,
            is_invalid=apartment_id is None,
            on_error=self._show_error,
        )
        self.building_details: RequestState = use_request(
            self._get_building, on_error=self._show_error
        )

    async def _get_apartment(self) -> dict | None:
        response = await self.client.get(f"/apartments/{self.apartment_id}")
        response.raise_for_status()
        return response.json()

    async def _get_building(self) -> dict | None:
        info = self.apartment_info.value
        if not info:
            return None
        response = await self.client.get(f"/buildings/{info['buildingId']}")
        response.raise_for_status()
        return response.json()

    def _show_error(self, exc: Exception) -> None:
        print(f"Could not load: {exc}")

    async def refresh(self) -> None:
        await self.apartment_info.load()
        await self.building_details.load()


async def main() -> None:
    async with httpx.AsyncClient(base_url=API_URL) as client:
        page = ApartmentPage(client, apartment_id="42")
        page.apartment_info.subscribe(
            lambda snapshot: print("loading..." if snapshot.is_loading else snapshot.value)
        )
        await page.refresh()


if __name__ == "__main__":
    asyncio.run(main())
