"""Picking a random post from a Gelbooru-style image board."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Any

import requests


class GelbooruError(Exception):
    """Raised when a post cannot be fetched from the booru."""


def _search(booru_url: str, tags: list[str], pid: int | None = None) -> dict[str, Any]:
    query = (
        f"{booru_url}/index.php?page=dapi&s=post&q=index"
        f"&tags={'+'.join(tags)}&json=1&limit=1"
    )
    if pid is not None:
        query += f"&pid={pid}"
    try:
        response = requests.get(query)
        response.raise_for_status()
        body = response.json()
    except requests.RequestException as error:
        raise GelbooruError(str(error)) from error
    except ValueError as error:
        raise GelbooruError(f"invalid JSON in response: {error}") from error
    if not isinstance(body, dict):
        raise GelbooruError("unexpected response shape")
    return body


def _count(body: dict[str, Any]) -> int:
    try:
        count = body["@attributes"]["count"]
    except (KeyError, TypeError) as error:
        raise GelbooruError("response has no post count") from error
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise GelbooruError("post count is not a non-negative integer")
    return count


@dataclass(frozen=True)
class GelbooruPost:
    """An image file together with the page that shows it."""

    file_url: str
    post_url: str

    @classmethod
    def random(
        cls,
        booru_url: str,
        tags: list[str],
        rng: _random.Random | None = None,
    ) -> GelbooruPost:
        """Choose a post matching ``tags`` uniformly at random."""
        rng = rng or _random.Random()
        count = _count(_search(booru_url, tags))
        if count == 0:
            raise GelbooruError(f"{booru_url} has no posts for {tags!r}")
        page = rng.getrandbits(32) % count

        body = _search(booru_url, tags, page)
        _count(body)
        posts = body.get("post")
        if not posts or not isinstance(posts, list):
            raise GelbooruError(f"{booru_url} returned [] for {tags!r}")
        post = posts[0]
        if (
            not isinstance(post, dict)
            or not isinstance(post.get("file_url"), str)
            or isinstance(post.get("id"), bool)
            or not isinstance(post.get("id"), int)
        ):
            raise GelbooruError("post lacks file_url or id")
        return cls(
            file_url=post["file_url"],
            post_url=f"{booru_url}/index.php?page=post&s=view&id={post['id']}",
        )

    def file_name(self) -> str:
        """Last path segment of the file URL."""
        return self.file_url.split("/")[-1]