"""Minimal client for the parts of the Misskey API the bot needs."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

import requests


class PostVisibility(StrEnum):
    """Who can see a created note."""

    PUBLIC = "public"
    HOME = "home"
    FOLLOWERS = "followers"


class MisskeyError(Exception):
    """Raised when a Misskey API call fails or returns something unexpected."""


class MisskeyClient:
    """Authenticated client for one Misskey instance."""

    def __init__(self, token: str, base_url: str) -> None:
        self.token = token
        self.base_url = base_url
        self._session = requests.Session()

    def _call(self, endpoint: str, payload: dict[str, Any]) -> requests.Response:
        try:
            response = self._session.post(
                f"{self.base_url}/api/{endpoint}",
                json=payload,
                headers={"Authorization": f"Bearer {self.token}"},
            )
            response.raise_for_status()
        except requests.RequestException as error:
            raise MisskeyError(str(error)) from error
        return response

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as error:
            raise MisskeyError(f"invalid JSON in response: {error}") from error

    def find_file_by_name(self, name: str) -> str:
        """Return the id of the first drive file called ``name``."""
        files = self._json(self._call("drive/files/find", {"name": name}))
        if not isinstance(files, list):
            raise MisskeyError("expected a list of drive files")
        if not files:
            raise MisskeyError(f"Misskey returned [] when searching for file {name}")
        first = files[0]
        if not isinstance(first, dict) or not isinstance(first.get("id"), str):
            raise MisskeyError("drive file without an id")
        return first["id"]

    def upload_file_from_url(self, url: str, is_sensitive: bool) -> None:
        """Ask the instance to download ``url`` into the drive."""
        self._call(
            "drive/files/upload-from-url",
            {"url": url, "isSensitive": is_sensitive},
        )

    def post_message(
        self,
        text: str,
        file_ids: list[str],
        visibility: PostVisibility | str,
    ) -> str:
        """Create a note and return its id."""
        payload = {
            "text": text,
            "fileIds": list(file_ids),
            "visibility": str(PostVisibility(visibility)),
        }
        body = self._json(self._call("notes/create", payload))
        try:
            note_id = body["createdNote"]["id"]
        except (TypeError, KeyError) as error:
            raise MisskeyError("response has no createdNote id") from error
        if not isinstance(note_id, str):
            raise MisskeyError("createdNote id is not a string")
        return note_id