"""Public colleges facade and landing-page visibility/order."""

import logging
from typing import Any

from ..http_client import HttpClient
from ..schemas.responses import ListPage
from ..services.filters import sort_for_landing
from .resources import resource_client

log = logging.getLogger(__name__)


class CollegesAPI:
    def __init__(self, http: HttpClient):
        self.colleges = resource_client(http, "/colleges", collection_key="colleges", entity_key="college")

    async def get_all(self, params: dict | None = None) -> ListPage:
        return await self.colleges.list(params)

    async def get_landing_colleges(self) -> ListPage:
        """All colleges ordered for the landing-page manager."""
        return await self.colleges.list(post_filter=sort_for_landing)

    async def get_by_id(self, college_id: Any) -> dict:
        return await self.colleges.get(college_id)

    async def set_landing(self, college_id: Any, *, show_on_landing: bool, landing_order: int = 0) -> dict:
        log.info("College %s landing: show=%s order=%s", college_id, show_on_landing, landing_order)
        return await self.colleges.action(
            "PATCH", college_id, "landing",
            body={"show_on_landing": show_on_landing, "landing_order": landing_order},
        )

    async def toggle_landing(self, college: dict, show_on_landing: bool) -> dict:
        """Flip visibility, keeping the college's current order."""
        return await self.set_landing(
            college["id"], show_on_landing=show_on_landing,
            landing_order=college.get("landing_order") or 0,
        )

    async def reorder_landing(self, college: dict, landing_order: int) -> dict:
        """Move the college, keeping its current visibility."""
        return await self.set_landing(
            college["id"], show_on_landing=bool(college.get("show_on_landing")),
            landing_order=landing_order,
        )
