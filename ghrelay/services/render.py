"""Display messages for classified GitHub events."""

from __future__ import annotations

import datetime as dt

from ghrelay.models import (
    CommitSummary,
    EventRecord,
    ForkEvent,
    PushEvent,
    ReleaseEvent,
    StarEvent,
)
from ghrelay.schemas import DisplayMessage, EmbedField
from ghrelay.timezone import now_utc
from ghrelay.utils import first_line_truncated, plural_commits

MAX_COMMITS = 5  # Show up to five commits in push summaries.
SHORT_SHA = 7

GREEN = (46, 160, 67)
GOLD = (255, 215, 0)
BLUE = (0, 0, 255)
ORANGE = (255, 200, 0)

FOOTER_PUSH = "GitHub • Push Event"
FOOTER_STAR = "GitHub • Star Event"
FOOTER_FORK = "GitHub • Fork Event"
FOOTER_RELEASE = "GitHub • Release Event"


def _commit_line(commit: CommitSummary) -> str:
    sha = commit.id[:SHORT_SHA]
    return f"• [`{sha}`]({commit.url}) {first_line_truncated(commit.message)}"


def render_commit_list(commits: tuple[CommitSummary, ...]) -> str:
    """
    Render at most the first five commits, one per line.

    A trailing '... and N more commit(s)' line counts the commits left out.
    """
    lines = [_commit_line(commit) for commit in commits[:MAX_COMMITS]]
    overflow = len(commits) - MAX_COMMITS
    if overflow > 0:
        lines.append(f"... and {overflow} more commit(s)")
    return "\n".join(lines)


def _render_push(event: PushEvent, now: dt.datetime) -> DisplayMessage:
    return DisplayMessage(
        title=f"Push to {event.repo_name}",
        link_target=event.compare_url,
        accent_color=GREEN,
        fields=(
            EmbedField(name="Author", value=event.author, inline=True),
            EmbedField(name="Branch", value=event.branch, inline=True),
            EmbedField(name="Count", value=plural_commits(len(event.commits)), inline=True),
            EmbedField(name="Commits", value=render_commit_list(event.commits), inline=False),
        ),
        footer=FOOTER_PUSH,
        timestamp=now,
    )


def _render_star(event: StarEvent, now: dt.datetime) -> DisplayMessage:
    return DisplayMessage(
        title=f"New star on {event.repo_name}",
        link_target=event.repo_url,
        accent_color=GOLD,
        fields=(
            EmbedField(name="User", value=event.user, inline=True),
            EmbedField(name="Total stars", value=str(event.total_stars), inline=True),
        ),
        footer=FOOTER_STAR,
        timestamp=now,
    )


def _render_fork(event: ForkEvent, now: dt.datetime) -> DisplayMessage:
    return DisplayMessage(
        title=f"New fork of {event.original_repo}",
        link_target=event.fork_url,
        accent_color=BLUE,
        fields=(
            EmbedField(name="User", value=event.user, inline=True),
            EmbedField(name="Fork", value=event.fork_name, inline=True),
            EmbedField(name="Total forks", value=str(event.total_forks), inline=True),
        ),
        footer=FOOTER_FORK,
        timestamp=now,
    )


def _render_release(event: ReleaseEvent, now: dt.datetime) -> DisplayMessage:
    label = "Pre-Release" if event.is_pre_release else "Release"
    return DisplayMessage(
        title=f"New {label} on {event.repo_name}",
        link_target=event.release_url,
        accent_color=ORANGE if event.is_pre_release else BLUE,
        fields=(
            EmbedField(name="Version", value=event.tag_name, inline=True),
            EmbedField(name="Author", value=event.author_name, inline=True),
            EmbedField(
                name="Description",
                value=first_line_truncated(event.description),
                inline=False,
            ),
        ),
        footer=FOOTER_RELEASE,
        timestamp=now,
    )


def render(record: EventRecord, now: dt.datetime | None = None) -> DisplayMessage:
    """
    Build the display message for ``record``.

    Output is fully determined by the record except for ``timestamp``,
    which is the render time unless ``now`` is given.
    """
    stamp = now or now_utc()
    match record:
        case PushEvent():
            return _render_push(record, stamp)
        case StarEvent():
            return _render_star(record, stamp)
        case ForkEvent():
            return _render_fork(record, stamp)
        case ReleaseEvent():
            return _render_release(record, stamp)
        case _:
            raise TypeError(f"no renderer for {type(record).__name__}")
