"""Stories and comments from the Hacker News JSON API, and how a listing shows them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import requests

from demoapps.shop import _list, _require, _str

BASE_API_URL = "https://hacker-news.firebaseio.com/v0/"
ITEM_API = "item/"
USER_API = "user/"
TOP_STORIES_LIMIT = 30
_TIMEOUT = 30

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")
_MISSING = object()


def _object(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    return data


def _check_i64(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"{what} out of range: {value}")
    return value


def _i64(data: dict[str, Any], key: str) -> int:
    return _check_i64(_require(data, key), f"field {key!r}")


def _i64_or_zero(data: dict[str, Any], key: str) -> int:
    if key not in data:
        return 0
    return _i64(data, key)


def _str_or_empty(data: dict[str, Any], key: str) -> str:
    if key not in data:
        return ""
    return _str(data, key)


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _kids(data: dict[str, Any]) -> list[int]:
    if "kids" not in data:
        return []
    return [_check_i64(kid, "kid id") for kid in _list(data, "kids")]


def _timestamp(data: dict[str, Any], key: str) -> datetime:
    seconds = _i64(data, key)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise ValueError(f"timestamp out of range: {seconds}") from None


def _trim_prefix_all(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _format_time(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment:%m/%d/%y} {hour:>2}:{moment:%M} {meridiem}"


def _get_json(url: str) -> Any:
    return requests.get(url, timeout=_TIMEOUT).json()


@dataclass
class PreviewState:
    """Which story, if any, is open in the preview pane."""

    active_story: int | None = None

    @classmethod
    def parse(cls, text: str) -> PreviewState:
        """Parse a story id as it appears in the route."""
        if not _INTEGER.fullmatch(text):
            raise ValueError(f"invalid story id: {text!r}")
        return cls(active_story=_check_i64(int(text), "story id"))

    def __str__(self) -> str:
        return "" if self.active_story is None else str(self.active_story)


@dataclass
class CommentData:
    """A comment; deleted comments come without author or text."""

    id: int
    time: datetime
    type: str
    by: str = ""
    text: str = ""
    kids: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CommentData:
        data = _object(data)
        return cls(
            id=_i64(data, "id"),
            by=_str_or_empty(data, "by"),
            text=_str_or_empty(data, "text"),
            time=_timestamp(data, "time"),
            kids=_kids(data),
            type=_str(data, "type"),
        )


@dataclass
class StoryItem:
    """A story as stored by the API."""

    id: int
    title: str
    time: datetime
    type: str
    url: str | None = None
    text: str | None = None
    by: str = ""
    score: int = 0
    descendants: int = 0
    kids: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoryItem:
        data = _object(data)
        return cls(
            id=_i64(data, "id"),
            title=_str(data, "title"),
            url=_optional_str(data, "url"),
            text=_optional_str(data, "text"),
            by=_str_or_empty(data, "by"),
            score=_i64_or_zero(data, "score"),
            descendants=_i64_or_zero(data, "descendants"),
            time=_timestamp(data, "time"),
            kids=_kids(data),
            type=_str(data, "type"),
        )


@dataclass
class StoryPageData:
    """A story together with any comments already loaded for it."""

    item: StoryItem
    comments: list[CommentData] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoryPageData:
        data = _object(data)
        comments = (
            [CommentData.from_dict(entry) for entry in _list(data, "comments")]
            if "comments" in data
            else []
        )
        return cls(item=StoryItem.from_dict(data), comments=comments)


@dataclass
class StoryListing:
    """The text shown for one story in the list of top stories."""

    id: int
    title: str
    url: str
    hostname: str
    by: str
    score: str
    comments: str
    time: str

    @classmethod
    def from_item(cls, item: StoryItem) -> StoryListing:
        url = item.url or ""
        hostname = url
        for prefix in ("https://", "http://", "www."):
            hostname = _trim_prefix_all(hostname, prefix)
        score_unit = " point" if item.score == 1 else " points"
        comment_unit = " comment" if len(item.kids) == 1 else " comments"
        return cls(
            id=item.id,
            title=item.title,
            url=url,
            hostname=hostname,
            by=item.by,
            score=f"{item.score} {score_unit}",
            comments=f"{len(item.kids)} {comment_unit}",
            time=_format_time(item.time),
        )


def get_story(story_id: int) -> StoryPageData:
    return StoryPageData.from_dict(_get_json(f"{BASE_API_URL}{ITEM_API}{story_id}.json"))


def get_comment(comment_id: int) -> CommentData:
    return CommentData.from_dict(_get_json(f"{BASE_API_URL}{ITEM_API}{comment_id}.json"))


def get_top_stories(limit: int = TOP_STORIES_LIMIT) -> list[int]:
    """Ids of the current top stories, at most ``limit`` of them."""
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    payload = _get_json(f"{BASE_API_URL}topstories.json")
    if not isinstance(payload, list):
        raise ValueError("expected a list of story ids")
    return [_check_i64(story_id, "story id") for story_id in payload[:limit]]