"""Commit Generator - diff in, commit message out."""

import logging
from typing import Callable, Optional

from committer.config import ConfigResolver, ResolvedConfig
from committer.llm import LLMClient, get_client
from committer.prompts import CommitMessage, PromptBuilder, parse_response
from committer.prompts.builder import has_context

logger = logging.getLogger(__name__)


class CommitGenerator:
    """Builds the prompt, calls the model and parses the reply."""

    def __init__(self, config: ResolvedConfig, client: LLMClient, builder: Optional[PromptBuilder] = None):
        self.config = config
        self.client = client
        self.builder = builder or PromptBuilder()

    def build_prompt(self, diff: str, user_context: Optional[str] = None) -> str:
        return self.builder.build(diff, user_context, self.config)

    def generate(self, diff: str, user_context: Optional[str] = None, timeout: Optional[float] = None) -> CommitMessage:
        prompt = self.build_prompt(diff, user_context)
        reply = self.client.send(prompt, timeout=timeout)
        return parse_response(reply, has_context(user_context))


def prepare_commit_message(
    diff: str,
    user_context: Optional[str],
    resolver: ConfigResolver,
    client_factory: Callable[[ResolvedConfig], LLMClient] = get_client,
) -> CommitMessage:
    """Resolve config, build a client and generate a message for the diff."""
    config = resolver.resolve()
    client = client_factory(config)
    return CommitGenerator(config, client).generate(diff, user_context)
