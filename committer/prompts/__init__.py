"""Prompt building and response parsing"""

from committer.prompts.builder import PromptBuilder, PromptContext, select_template, build_scope_directive, render
from committer.prompts.parser import CommitMessage, parse_response, extract_text, wrap_body
from committer.prompts.templates import SUMMARY_ONLY, SUMMARY_AND_BODY

__all__ = [
    "PromptBuilder",
    "PromptContext",
    "select_template",
    "build_scope_directive",
    "render",
    "CommitMessage",
    "parse_response",
    "extract_text",
    "wrap_body",
    "SUMMARY_ONLY",
    "SUMMARY_AND_BODY",
]
