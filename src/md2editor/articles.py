"""In-memory queue of Markdown articles awaiting import.

Storage is the caller's concern: :meth:`ArticleQueue.to_list` and
:meth:`ArticleQueue.from_list` convert to and from plain dicts.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

from md2editor.parser import UNTITLED, extract_title

ACCEPTED_CONTENT_TYPES = {"text/markdown", "text/plain"}
_MD_SUFFIX_RE = re.compile(r"\.md$", re.IGNORECASE)


def accepts(name: str, content_type: str = "") -> bool:
    """True for ``.md`` files or Markdown / plain-text content types."""
    return bool(_MD_SUFFIX_RE.search(name)) or content_type in ACCEPTED_CONTENT_TYPES


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class Article:
    name: str
    title: str
    content: str
    id: str = field(default_factory=_new_id)
    added_at: str = field(default_factory=_now)

    @property
    def size(self) -> int:
        """Content size in UTF-8 bytes."""
        return len(self.content.encode("utf-8"))


class ArticleQueue:
    """Ordered articles keyed by file name; re-adding a name replaces it."""

    def __init__(self, articles: Optional[list[Article]] = None) -> None:
        self._articles: list[Article] = list(articles or [])

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[Article]:
        return iter(self._articles)

    def add(self, name: str, content: str, content_type: str = "") -> Optional[Article]:
        """Queue *content* under *name*; ``None`` if the file type is rejected."""
        if not accepts(name, content_type):
            return None

        article = Article(
            name=name,
            title=extract_title(content, _MD_SUFFIX_RE.sub("", name)),
            content=content,
        )
        for idx, existing in enumerate(self._articles):
            if existing.name == name:
                article.id = existing.id
                self._articles[idx] = article
                return article
        self._articles.append(article)
        return article

    def get(self, article_id: str) -> Optional[Article]:
        return next((a for a in self._articles if a.id == article_id), None)

    def remove(self, article_id: str) -> Optional[Article]:
        article = self.get(article_id)
        if article is not None:
            self._articles.remove(article)
        return article

    def clear(self) -> None:
        self._articles.clear()

    # -- serialisation ------------------------------------------------------

    def to_list(self) -> list[dict[str, Any]]:
        return [asdict(a) for a in self._articles]

    @classmethod
    def from_list(cls, entries: Any) -> ArticleQueue:
        """Rebuild a queue, skipping entries without string content."""
        if not isinstance(entries, list):
            return cls()
        articles: list[Article] = []
        for entry in entries:
            if not isinstance(entry, dict) or not isinstance(entry.get("content"), str):
                continue
            name = str(entry.get("name") or "")
            kwargs = {k: str(entry[k]) for k in ("id", "added_at") if entry.get(k)}
            articles.append(Article(
                name=name,
                title=str(entry.get("title") or name or UNTITLED),
                content=entry["content"],
                **kwargs,
            ))
        return cls(articles)
