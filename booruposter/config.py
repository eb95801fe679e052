"""Bot configuration read from a TOML file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from os import PathLike
from typing import Any

from booruposter.misskey import PostVisibility


def _lookup(data: dict[str, Any], dotted: str) -> Any:
    node: Any = data
    for part in dotted.split("."):
        if not isinstance(node, dict) or part not in node:
            raise ValueError(f"missing configuration key {dotted!r}")
        node = node[part]
    return node


def _string(data: dict[str, Any], key: str) -> str:
    value = _lookup(data, key)
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string")
    return value


def _boolean(data: dict[str, Any], key: str) -> bool:
    value = _lookup(data, key)
    if not isinstance(value, bool):
        raise ValueError(f"{key!r} must be a boolean")
    return value


def _number(data: dict[str, Any], key: str) -> float:
    value = _lookup(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key!r} must be a number")
    return float(value)


@dataclass(frozen=True)
class Config:
    """Settings for the account, the posts, the booru and the posting loop."""

    token: str
    instance_url: str
    message: str
    append_post_url: bool
    visibility: PostVisibility
    sensitive: bool
    booru_url: str
    tags: list[str]
    post_interval: float
    error_timeout: float

    @classmethod
    def from_toml(cls, text: str) -> Config:
        """Build a configuration from TOML text."""
        data = tomllib.loads(text)
        tags = _lookup(data, "gelbooru.tags")
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ValueError("'gelbooru.tags' must be a list of strings")
        return cls(
            token=_string(data, "account.token"),
            instance_url=_string(data, "account.instance_url"),
            message=_string(data, "post.message"),
            append_post_url=_boolean(data, "post.append_post_url"),
            visibility=PostVisibility(_string(data, "post.visibility")),
            sensitive=_boolean(data, "post.sensitive"),
            booru_url=_string(data, "gelbooru.booru_url"),
            tags=list(tags),
            post_interval=_number(data, "bot.post_interval"),
            error_timeout=_number(data, "bot.error_timeout"),
        )

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Config:
        """Read and parse the configuration file at ``path``."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_toml(handle.read())