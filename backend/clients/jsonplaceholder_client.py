"""Client for the public JSONPlaceholder API (https://jsonplaceholder.typicode.com/).

A thin demonstration wrapper: one method per endpoint, no retries.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from backend.utils.errors import ExternalServiceError

logger = logging.getLogger(__name__)

SERVICE_NAME = "JSONPlaceholder"
DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


@dataclass
class ApiResponse:
    data: Any
    status: int
    status_text: str


class JsonPlaceholderClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 10,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> ApiResponse:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, json=json, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.error("API Error: %s %s failed: %s", method, url, exc)
            if exc.response is not None:
                logger.error("Status: %s, body: %s", exc.response.status_code, exc.response.text)
            raise ExternalServiceError(SERVICE_NAME, str(exc)) from exc
        # DELETE answers with an empty object, some errors with no body at all
        data = resp.json() if resp.content else {}
        return ApiResponse(data=data, status=resp.status_code, status_text=resp.reason)

    def get_posts(self) -> ApiResponse:
        return self._request("GET", "/posts")

    def get_post(self, post_id: int) -> ApiResponse:
        return self._request("GET", f"/posts/{post_id}")

    def create_post(self, post: Dict[str, Any]) -> ApiResponse:
        return self._request("POST", "/posts", json=post)

    def update_post(self, post_id: int, post: Dict[str, Any]) -> ApiResponse:
        return self._request("PUT", f"/posts/{post_id}", json=post)

    def delete_post(self, post_id: int) -> ApiResponse:
        return self._request("DELETE", f"/posts/{post_id}")

    def get_comments_by_post(self, post_id: int) -> ApiResponse:
        return self._request("GET", f"/posts/{post_id}/comments")

    def get_users(self) -> ApiResponse:
        return self._request("GET", "/users")

    def get_user(self, user_id: int) -> ApiResponse:
        return self._request("GET", f"/users/{user_id}")

    def get_todos_by_user(self, user_id: int) -> ApiResponse:
        return self._request("GET", f"/users/{user_id}/todos")

    def get_albums_by_user(self, user_id: int) -> ApiResponse:
        return self._request("GET", f"/users/{user_id}/albums")

    def get_photos_by_album(self, album_id: int) -> ApiResponse:
        return self._request("GET", f"/albums/{album_id}/photos")
