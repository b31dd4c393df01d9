"""Prompt Builder - Construct LLM prompts for commit message generation."""

import logging
import re
from dataclasses import dataclass

from committer.config import ResolvedConfig
from committer.prompts.templates import (
    SUMMARY_ONLY,
    SUMMARY_AND_BODY,
    NO_SCOPE_INSTRUCTION,
    CHOOSE_SCOPE_INSTRUCTION,
)

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r'\{(\w+)\}')


def has_context(user_context: str | None) -> bool:
    """User context selects the summary-and-body template only when non-empty."""
    return bool(user_context)


def select_template(user_context: str | None) -> str:
    return SUMMARY_AND_BODY if has_context(user_context) else SUMMARY_ONLY


def build_scope_directive(scopes) -> tuple[str, str]:
    """Return (scopes_section, scope_instruction) for the configured scopes."""
    if not scopes:
        return "", NO_SCOPE_INSTRUCTION
    bullets = "\n".join(f"- {scope}" for scope in scopes)
    return f"\nScopes:\n{bullets}\n", CHOOSE_SCOPE_INSTRUCTION


def render(template: str, values: dict[str, str]) -> str:
    """Substitute {name} placeholders in one pass.

    Substituted text is never scanned again, so braces or % in a diff
    come through unchanged. Unknown placeholders are left as-is.
    """
    def _replace(match: re.Match) -> str:
        name = match.group(1)
        return values[name] if name in values else match.group(0)

    return _PLACEHOLDER_RE.sub(_replace, template)


@dataclass
class PromptContext:
    """Everything that shapes a single prompt."""
    diff: str
    user_context: str | None = None
    scopes: tuple[str, ...] = ()
    formatting_rules: str = ""

    def __post_init__(self):
        if not self.diff:
            raise ValueError("Cannot build a prompt from an empty diff")


class PromptBuilder:
    """Picks a template and fills it in."""

    def build(self, diff: str, user_context: str | None, config: ResolvedConfig) -> str:
        context = PromptContext(
            diff=diff,
            user_context=user_context,
            scopes=config.scopes,
            formatting_rules=config.formatting_rules,
        )
        return self.build_from_context(context)

    def build_from_context(self, context: PromptContext) -> str:
        template = select_template(context.user_context)
        scopes_section, scope_instruction = build_scope_directive(context.scopes)
        logger.debug(
            "Using %s template with %d scope(s)",
            "summary-and-body" if template is SUMMARY_AND_BODY else "summary-only",
            len(context.scopes),
        )
        return render(template, {
            'diff': context.diff,
            'commit_context': context.user_context or "",
            'scopes_section': scopes_section,
            'scope_instruction': scope_instruction,
            'formatting_rules': context.formatting_rules,
        })
