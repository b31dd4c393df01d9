"""Response Parser - turn a model reply into a commit message."""

import logging
import re
import textwrap
from dataclasses import dataclass
from typing import Any, Optional

from committer.errors import ParseError

logger = logging.getLogger(__name__)

BODY_WIDTH = 80

_PARAGRAPH_RE = re.compile(r'\n\s*\n')
_LIST_ITEM_RE = re.compile(r'^[-*] ')


@dataclass(frozen=True)
class CommitMessage:
    summary: str
    body: Optional[str] = None

    def __str__(self) -> str:
        if self.body:
            return f"{self.summary}\n\n{self.body}"
        return self.summary


def _get(obj: Any, key):
    """Index a mapping/sequence, or read an attribute from an SDK object."""
    if isinstance(obj, (dict, list, tuple)):
        return obj[key]
    return getattr(obj, key)


def extract_text(reply: Any) -> str:
    """Return the text of the first content block."""
    try:
        text = _get(_get(_get(reply, 'content'), 0), 'text')
    except (KeyError, IndexError, TypeError, AttributeError):
        raise ParseError(f"No text content in model reply: {reply!r}")
    if not isinstance(text, str):
        raise ParseError(f"Model reply text is not a string: {text!r}")
    return text


def _wrap_paragraph(paragraph: str, width: int) -> list[str]:
    # List items keep their own line and get a hanging indent.
    items: list[str] = []
    for line in paragraph.split('\n'):
        stripped = line.strip()
        if not stripped:
            continue
        if _LIST_ITEM_RE.match(stripped) or not items:
            items.append(stripped)
        else:
            items[-1] = f"{items[-1]} {stripped}"

    lines = []
    for item in items:
        indent = '  ' if _LIST_ITEM_RE.match(item) else ''
        lines.extend(textwrap.wrap(
            item,
            width=width,
            subsequent_indent=indent,
            break_long_words=False,
            break_on_hyphens=False,
        ))
    return lines


def wrap_body(text: str, width: int = BODY_WIDTH) -> str:
    """Re-flow text so no line exceeds width, breaking only at whitespace.

    Blank-line separated paragraphs are kept apart. A single word longer
    than width is left whole on its own line.
    """
    paragraphs = [p for p in _PARAGRAPH_RE.split(text.strip()) if p.strip()]
    wrapped = ['\n'.join(_wrap_paragraph(p, width)) for p in paragraphs]
    return '\n\n'.join(wrapped)


def parse_response(reply: Any, had_context: bool) -> CommitMessage:
    """
    Build a CommitMessage from a raw model reply.

    Without user context the whole text is the summary, even if the model
    returned more lines. With context the text is split on the first blank
    line into summary and body.
    """
    text = extract_text(reply)

    if not had_context:
        return CommitMessage(summary=text.strip())

    parts = text.split('\n\n', 1)
    summary = parts[0].strip()
    body = parts[1].strip() if len(parts) > 1 else ""
    logger.debug("Parsed summary %r with %d body chars", summary, len(body))
    return CommitMessage(summary=summary, body=wrap_body(body) if body else None)
