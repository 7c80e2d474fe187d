"""Heuristic discovery of the title and body editors on an unstable page.

The resolver re-queries the page on every call because the host page keeps
mutating its DOM.  :meth:`EditorResolver.wait_for_editors` polls on a fixed
interval until both targets resolve to distinct nodes or the timeout elapses,
yielding to the event loop between attempts.
"""

from __future__ import annotations

import asyncio
import logging
import re
import time
from dataclasses import dataclass
from typing import Optional

from md2editor.classifier import (
    Candidate,
    count_editable_nodes,
    is_visible,
    resolve_editable_target,
    visible_editable_targets,
)
from md2editor.dom import Element, Page
from md2editor.errors import NoBodyTargetError, NoTitleTargetError, TargetConflictError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 5000
POLL_INTERVAL_MS = 120

TITLE_SELECTORS = (
    '[contenteditable][data-placeholder*="title" i]',
    '[contenteditable][aria-label*="title" i]',
    '[role="textbox"][aria-label*="title" i]',
    '[data-placeholder*="title" i]',
    'input[placeholder*="title" i], textarea[placeholder*="title" i]',
    "h1",
)

STRONG_BODY_RE = re.compile(r"tell your story", re.IGNORECASE)
WEAK_BODY_RE = re.compile(r"story|editor|body|post", re.IGNORECASE)

STRONG_BODY_SCORE = 10
WEAK_BODY_SCORE = 4
SHORT_TEXT_SCORE = 1
BELOW_TITLE_SCORE = 3


@dataclass(frozen=True)
class Resolution:
    """Outcome of one resolution attempt; either target may be absent."""

    title: Optional[Element] = None
    body: Optional[Element] = None
    editable_count: int = 0

    @property
    def conflict(self) -> bool:
        return self.title is not None and self.title == self.body

    @property
    def complete(self) -> bool:
        return self.title is not None and self.body is not None and not self.conflict

    def require(self, *, title: bool = True, body: bool = True) -> Resolution:
        """Raise unless the requested targets were found and are distinct."""
        if title and self.title is None:
            raise NoTitleTargetError(self.editable_count)
        if body and self.body is None:
            raise NoBodyTargetError(self.editable_count)
        if self.conflict:
            raise TargetConflictError()
        return self


class EditorResolver:
    """Locate the title and body editors of *page*.

    Usage::

        resolver = EditorResolver(page)
        resolution = await resolver.wait_for_editors(timeout_ms=2000)
        resolution.require()
    """

    def __init__(
        self,
        page: Page,
        *,
        title_selectors: tuple[str, ...] = TITLE_SELECTORS,
        strong_body_re: re.Pattern = STRONG_BODY_RE,
        weak_body_re: re.Pattern = WEAK_BODY_RE,
    ) -> None:
        self.page = page
        self.title_selectors = title_selectors
        self.strong_body_re = strong_body_re
        self.weak_body_re = weak_body_re

    # -- title --------------------------------------------------------------

    def find_title_target(self) -> Optional[Element]:
        """Return the title editor, or ``None`` if the page has no editor."""
        for selector in self.title_selectors:
            for node in self.page.query_selector_all(selector):
                if not is_visible(node):
                    continue
                target = resolve_editable_target(node)
                if target is not None:
                    logger.debug("Title matched selector %r", selector)
                    return target

        # Fallback: topmost visible editor.
        editables = visible_editable_targets(self.page)
        if not editables:
            return None
        editables.sort(key=lambda el: el.bounding_box().top)
        return editables[0]

    # -- body ---------------------------------------------------------------

    def score(self, candidate: Candidate, title: Optional[Candidate]) -> int:
        hints = candidate.hint_text
        score = 0
        if self.strong_body_re.search(hints):
            score += STRONG_BODY_SCORE
        if self.weak_body_re.search(hints):
            score += WEAK_BODY_SCORE
        if candidate.is_short:
            score += SHORT_TEXT_SCORE
        if title is not None and candidate.rect.top > title.rect.bottom:
            score += BELOW_TITLE_SCORE
        return score

    def find_body_target(self, title: Optional[Element]) -> Optional[Element]:
        """Return the best-scoring editor other than *title*."""
        editables = visible_editable_targets(self.page)
        title_candidate = Candidate.from_element(title) if title is not None else None

        scored = [
            (self.score(Candidate.from_element(el), title_candidate), el)
            for el in editables
            if el != title
        ]
        if scored:
            # max() keeps the first of equal scores, i.e. document order.
            best_score, best = max(scored, key=lambda pair: pair[0])
            logger.debug("Body scored %d among %d candidates", best_score, len(scored))
            return best

        # Only the title itself is editable; returning it reports a conflict.
        return editables[0] if editables else None

    # -- polling ------------------------------------------------------------

    def resolve(self) -> Resolution:
        """Run one title + body search against the current page."""
        title = self.find_title_target()
        body = self.find_body_target(title)
        return Resolution(title=title, body=body, editable_count=count_editable_nodes(self.page))

    async def wait_for_editors(
        self,
        timeout_ms: float = DEFAULT_TIMEOUT_MS,
        interval_ms: float = POLL_INTERVAL_MS,
    ) -> Resolution:
        """Poll until both editors resolve to distinct nodes or *timeout_ms* elapses.

        Returns whatever was found last; callers must check for absent
        targets or call :meth:`Resolution.require`.
        """
        deadline = time.monotonic() + timeout_ms / 1000
        attempts = 0
        while True:
            resolution = self.resolve()
            attempts += 1
            if resolution.complete:
                logger.debug("Editors resolved after %d attempt(s)", attempts)
                return resolution
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            await asyncio.sleep(min(interval_ms / 1000, remaining))

        logger.warning(
            "Editor resolution timed out after %d attempt(s): title=%s body=%s conflict=%s",
            attempts,
            resolution.title is not None,
            resolution.body is not None,
            resolution.conflict,
        )
        return resolution
