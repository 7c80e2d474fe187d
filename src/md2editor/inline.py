"""Inline Markdown formatting: one line of raw text to an HTML-safe fragment.

Formatting is an ordered list of ``(pattern, replacement)`` rules.  Each rule
runs once over the output of the previous one, so escaping done first is never
undone and later rules cannot re-trigger earlier ones.

Text that must stay verbatim after its rule has run (attribute values, link
labels, code span content) has its ``*``, ``_`` and backtick characters
written as numeric character references.  Browsers render them identically,
and the emphasis rules no longer see them.
"""

from __future__ import annotations

import re
from typing import Callable

_Rule = tuple[re.Pattern, Callable[[re.Match], str]]

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

_SHIELD = str.maketrans({"*": "&#42;", "_": "&#95;", "`": "&#96;"})


def escape_html(value: str) -> str:
    """Escape ``& < > " '`` to their entity forms."""
    for char, entity in _ESCAPES:
        value = value.replace(char, entity)
    return value


def _shield(value: str) -> str:
    return value.translate(_SHIELD)


def _title_attr(title: str | None) -> str:
    return f' title="{_shield(title)}"' if title else ""


# ---------------------------------------------------------------------------
# Rules (patterns match already-escaped text, so quotes appear as &quot;)
# ---------------------------------------------------------------------------

_IMAGE_RE = re.compile(r'!\[([^\]]*)\]\(([^)\s]+)(?:\s+&quot;(.+?)&quot;)?\)')
_LINK_RE = re.compile(r'(?<!!)\[([^\]]+)\]\(([^)\s]+)(?:\s+&quot;(?P<title>.+?)&quot;)?\)')
_PLAIN_LINK_RE = re.compile(r'(?<!!)\[([^\]]+)\]\(([^)\s]+)\)')
_CODE_RE = re.compile(r'`([^`]+)`')
_STRONG_STAR_RE = re.compile(r'\*\*([^*]+)\*\*')
_STRONG_UNDERSCORE_RE = re.compile(r'__([^_]+)__')
_EM_STAR_RE = re.compile(r'\*([^*]+)\*')
_EM_UNDERSCORE_RE = re.compile(r'_([^_]+)_')


def _image(m: re.Match[str]) -> str:
    alt, src, title = m.groups()
    return f'<img src="{_shield(src)}" alt="{_shield(alt)}"{_title_attr(title)} />'


def _link(m: re.Match[str]) -> str:
    label, href, title = m.group(1), m.group(2), m.groupdict().get("title")
    return f'<a href="{_shield(href)}"{_title_attr(title)}>{_shield(label)}</a>'


def _code(m: re.Match[str]) -> str:
    return f"<code>{_shield(m.group(1))}</code>"


def _wrap(tag: str) -> Callable[[re.Match[str]], str]:
    return lambda m: f"<{tag}>{m.group(1)}</{tag}>"


_MEDIA_RULES: list[_Rule] = [
    (_IMAGE_RE, _image),
    (_LINK_RE, _link),
]

# Without media support only bare links are recognised; titled ones stay literal.
_PLAIN_RULES: list[_Rule] = [
    (_PLAIN_LINK_RE, _link),
]

_TEXT_RULES: list[_Rule] = [
    (_CODE_RE, _code),
    (_STRONG_STAR_RE, _wrap("strong")),
    (_STRONG_UNDERSCORE_RE, _wrap("strong")),
    (_EM_STAR_RE, _wrap("em")),
    (_EM_UNDERSCORE_RE, _wrap("em")),
]


def inline_rules(support_media: bool = True) -> list[_Rule]:
    """Return the ordered substitution rules that follow escaping."""
    if support_media:
        return _MEDIA_RULES + _TEXT_RULES
    return _PLAIN_RULES + _TEXT_RULES


def format_inline(text: str, *, support_media: bool = True) -> str:
    """Format one logical run of raw Markdown text as inline HTML.

    Never raises; unmatched delimiters are left as literal text.  When
    *support_media* is false, image syntax and titled links are kept as
    literal text.
    """
    if not text:
        return ""
    out = escape_html(text)
    for pattern, replacement in inline_rules(support_media):
        out = pattern.sub(replacement, out)
    return out
