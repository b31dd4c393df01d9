"""LLM Client Package"""

from committer.config import ResolvedConfig
from committer.llm.base import LLMClient, classify_reply, normalize_error_body, error_payload, OVERLOADED_ERROR
from committer.llm.claude import ClaudeClient

PROVIDERS = {
    "claude": ClaudeClient,
}


def get_client(config: ResolvedConfig, provider: str = "claude") -> LLMClient:
    """Build a client for the provider. Raises ConfigError on missing settings."""
    if provider not in PROVIDERS:
        raise ValueError(f"Unknown provider: {provider}. Use one of: {', '.join(PROVIDERS)}.")
    return PROVIDERS[provider](config)


__all__ = [
    "LLMClient",
    "ClaudeClient",
    "get_client",
    "classify_reply",
    "normalize_error_body",
    "error_payload",
    "PROVIDERS",
    "OVERLOADED_ERROR",
]
