"""
api/messages.py — Messaging facade

Business Rules:
- A message with attachments is sent as multipart/form-data:
  title, content, type, priority, target_type, target_ids (JSON list),
  and one `attachments` part per file
- Without attachments the same fields go as a JSON body
- Search/type/priority filtering of inbox and sent lists is client-side

Called by: client.CollegeClient
Depends on: api/resources.py, services/filters.py
"""

import json
import logging
from pathlib import Path
from typing import Any

from ..http_client import HttpClient
from ..schemas.responses import ListPage
from ..services.filters import filter_messages
from ..utils import extract_items
from .resources import resource_client

log = logging.getLogger(__name__)


def build_message_fields(*, title: str, content: str, target_type: str,
                         message_type: str = "announcement", priority: str = "normal",
                         target_ids: list | None = None) -> dict:
    fields = {
        "title": title,
        "content": content,
        "type": message_type,
        "priority": priority,
        "target_type": target_type,
    }
    if target_ids:
        fields["target_ids"] = target_ids
    return fields


def _attachment_part(attachment: Any) -> tuple:
    """Accept a path, an (filename, bytes[, content_type]) tuple, or a file object."""
    if isinstance(attachment, (str, Path)):
        path = Path(attachment)
        return ("attachments", (path.name, path.read_bytes()))
    if isinstance(attachment, tuple):
        return ("attachments", attachment)
    name = Path(getattr(attachment, "name", "attachment")).name
    return ("attachments", (name, attachment))


class MessagesAPI:
    def __init__(self, http: HttpClient):
        self.http = http
        self.messages = resource_client(http, "/messages", collection_key="messages", entity_key="message")

    async def send_message(self, message_data: dict, attachments: list | None = None) -> dict:
        if not attachments:
            return await self.messages.create(message_data)

        fields = dict(message_data)
        if isinstance(fields.get("target_ids"), (list, tuple)):
            fields["target_ids"] = json.dumps(list(fields["target_ids"]))
        files = [_attachment_part(a) for a in attachments]
        log.info("Sending message '%s' with %d attachment(s)", fields.get("title"), len(files))
        return await self.messages.create(fields, files=files)

    async def get_messages(self, params: dict | None = None, *, search: str | None = None,
                           message_type: str | None = None, priority: str | None = None) -> ListPage:
        return await self.messages.list(
            params,
            post_filter=lambda items: filter_messages(
                items, search=search, message_type=message_type, priority=priority,
            ),
        )

    async def get_sent_messages(self, params: dict | None = None, *, search: str | None = None,
                                message_type: str | None = None, priority: str | None = None) -> ListPage:
        resp = await self.http.get(self.messages.path("sent"), params=params or {})
        body = resp.json()
        items = filter_messages(
            extract_items(body, "messages"), search=search, message_type=message_type, priority=priority,
        )
        pagination = body.get("pagination") if isinstance(body, dict) else None
        return ListPage(items=items, pagination=pagination)

    async def get_message(self, message_id: Any) -> dict:
        return await self.messages.get(message_id)

    async def mark_as_read(self, message_id: Any) -> dict:
        return await self.messages.action("PUT", message_id, "read")

    async def get_unread_count(self) -> int:
        body = await self.messages.action("GET", "unread", "count")
        return int(body.get("count") or body.get("unread_count") or 0)

    async def delete_message(self, message_id: Any) -> dict:
        return await self.messages.remove(message_id)
