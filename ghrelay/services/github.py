"""Classification of GitHub webhook payloads into event records."""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping, Optional, Sequence

from ghrelay.models import (
    CommitSummary,
    EventRecord,
    ForkEvent,
    PushEvent,
    ReleaseEvent,
    StarEvent,
)

BRANCH_PREFIX = "refs/heads/"

Classifier = Callable[[Mapping[str, Any], str], Optional[EventRecord]]

_MISSING = object()


class MalformedPayload(ValueError):
    """A required field for a notifying event is missing or mistyped."""

    def __init__(self, kind: str, path: str, reason: str = "missing or invalid"):
        self.kind = kind
        self.path = path
        self.reason = reason
        super().__init__(f"{kind} payload: {path} is {reason}")


def _format_path(path: Sequence[str | int]) -> str:
    out = ""
    for key in path:
        if isinstance(key, int):
            out += f"[{key}]"
        else:
            out += f".{key}" if out else key
    return out or "$"


def _dig(data: Any, path: Sequence[str | int]) -> Any:
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or key >= len(current):
                return _MISSING
            current = current[key]
            continue
        if not isinstance(current, Mapping) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _require(
    payload: Mapping[str, Any],
    kind: str,
    path: Sequence[str | int],
    expected: type | tuple[type, ...],
    *,
    nullable: bool = False,
) -> Any:
    value = _dig(payload, path)
    if value is _MISSING:
        raise MalformedPayload(kind, _format_path(path), "missing")
    if value is None and nullable:
        return None
    # bool is an int subclass; counters must not accept it.
    if isinstance(value, bool) and expected is int:
        raise MalformedPayload(kind, _format_path(path), "not an int")
    if not isinstance(value, expected):
        name = getattr(expected, "__name__", "value")
        raise MalformedPayload(kind, _format_path(path), f"not a {name}")
    return value


def _str(payload: Mapping[str, Any], kind: str, *path: str | int) -> str:
    return _require(payload, kind, path, str)


def _int(payload: Mapping[str, Any], kind: str, *path: str | int) -> int:
    return _require(payload, kind, path, int)


def _action(payload: Mapping[str, Any], kind: str) -> str:
    return _str(payload, kind, "action")


def _classify_push(payload: Mapping[str, Any], kind: str) -> PushEvent:
    repo_name = _str(payload, kind, "repository", "full_name")
    author = _str(payload, kind, "pusher", "name")
    ref = _str(payload, kind, "ref")
    compare_url = _str(payload, kind, "compare")
    raw_commits = _require(payload, kind, ("commits",), list)

    commits = []
    for index, entry in enumerate(raw_commits):
        if not isinstance(entry, Mapping):
            raise MalformedPayload(kind, f"commits[{index}]", "not an object")
        commits.append(
            CommitSummary(
                id=_str(payload, kind, "commits", index, "id"),
                message=_str(payload, kind, "commits", index, "message"),
                url=_str(payload, kind, "commits", index, "url"),
            )
        )

    branch = ref[len(BRANCH_PREFIX):] if ref.startswith(BRANCH_PREFIX) else ref
    return PushEvent(
        author=author,
        commits=tuple(commits),
        repo_name=repo_name,
        branch=branch,
        compare_url=compare_url,
    )


def _classify_star(payload: Mapping[str, Any], kind: str) -> StarEvent | None:
    if _action(payload, kind) != "created":
        return None
    return StarEvent(
        user=_str(payload, kind, "sender", "login"),
        repo_name=_str(payload, kind, "repository", "full_name"),
        repo_url=_str(payload, kind, "repository", "html_url"),
        total_stars=_int(payload, kind, "repository", "stargazers_count"),
    )


def _classify_fork(payload: Mapping[str, Any], kind: str) -> ForkEvent:
    return ForkEvent(
        user=_str(payload, kind, "sender", "login"),
        original_repo=_str(payload, kind, "repository", "full_name"),
        fork_url=_str(payload, kind, "forkee", "html_url"),
        fork_name=_str(payload, kind, "forkee", "full_name"),
        total_forks=_int(payload, kind, "repository", "forks_count"),
    )


def _classify_release(payload: Mapping[str, Any], kind: str) -> ReleaseEvent | None:
    if _action(payload, kind) != "published":
        return None
    return ReleaseEvent(
        repo_name=_str(payload, kind, "repository", "full_name"),
        tag_name=_str(payload, kind, "release", "tag_name"),
        author_name=_str(payload, kind, "release", "author", "login"),
        release_url=_str(payload, kind, "release", "html_url"),
        description=_require(payload, kind, ("release", "body"), str, nullable=True),
        is_pre_release=_require(payload, kind, ("release", "prerelease"), bool),
    )


CLASSIFIERS: dict[str, Classifier] = {
    "push": _classify_push,
    "star": _classify_star,
    "fork": _classify_fork,
    "release": _classify_release,
}

SUPPORTED_KINDS = frozenset(CLASSIFIERS)


def _load_payload(raw_body: Any, kind: str) -> Mapping[str, Any]:
    if isinstance(raw_body, (bytes, bytearray, str)):
        try:
            raw_body = json.loads(raw_body)
        except (ValueError, RecursionError) as exc:
            raise MalformedPayload(kind, "$", "not valid JSON") from exc
    if not isinstance(raw_body, Mapping):
        raise MalformedPayload(kind, "$", "not a JSON object")
    return raw_body


def classify(kind: str | None, raw_body: Any) -> EventRecord | None:
    """
    Map a webhook envelope to an event record.

    Returns ``None`` for kinds and actions that produce no notification
    (unknown kind, starring removed, release not yet published). Raises
    :class:`MalformedPayload` when a notifying event lacks a required field.
    """
    event_key = kind or ""
    classifier = CLASSIFIERS.get(event_key)
    if classifier is None:
        return None
    payload = _load_payload(raw_body, event_key)
    return classifier(payload, event_key)
