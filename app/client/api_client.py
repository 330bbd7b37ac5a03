# app/client/api_client.py
"""
Async client for the assignment JSON API.
"""
import logging
from datetime import date
from typing import Any, Dict, Optional

import httpx

from app.services.dates import format_date, is_valid_date

logger = logging.getLogger(__name__)


class AssignmentAPIError(Exception):
    """Non-2xx answer from the API, carrying the server's message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AssignmentAPI:
    def __init__(self, client: httpx.AsyncClient, api_prefix: str = "/api"):
        self.client = client
        self.api_prefix = api_prefix.rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self.api_prefix}/assignments{path}"

    async def _send(self, method: str, path: str, failure: str, **kwargs) -> Dict[str, Any]:
        response = await self.client.request(method, self._url(path), **kwargs)
        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if not response.is_success:
            message = payload.get("message") if isinstance(payload, dict) else None
            logger.error(f"{failure}: HTTP {response.status_code}")
            raise AssignmentAPIError(message or failure, response.status_code)
        return payload

    async def get_assignment(self, day: str) -> Dict[str, Any]:
        return await self._send("GET", f"/{day}", "Failed to load assignment")

    async def update_assignment(self, day: str, content: str) -> Dict[str, Any]:
        return await self._send(
            "PUT",
            f"/{day}",
            "Failed to update assignment",
            json={"date": day, "content": content.strip()},
        )

    async def delete_assignment(self, day: str) -> Dict[str, Any]:
        return await self._send("DELETE", f"/{day}", "Failed to delete assignment")

    async def list_assignments(
        self,
        start: Optional[str] = None,
        end: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = {}
        if start:
            params["start"] = start
        if end:
            params["end"] = end
        if limit:
            params["limit"] = limit
        return await self._send("GET", "", "Failed to list assignments", params=params)

    @staticmethod
    def format_date(day: date) -> str:
        return format_date(day)

    @staticmethod
    def is_valid_date(value: str) -> bool:
        return is_valid_date(value)
