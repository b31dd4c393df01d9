"""Claude (Anthropic) LLM Client"""

import logging
from typing import Any, Optional

from anthropic import Anthropic, APIConnectionError, APIError, APITimeoutError

from committer.config import ResolvedConfig
from committer.errors import ConfigError
from committer.llm.base import classify_reply, error_payload, normalize_error_body

logger = logging.getLogger(__name__)


class ClaudeClient:
    """Claude Messages API client. Needs api_key and model in the config."""

    MAX_TOKENS = 4096

    def __init__(self, config: ResolvedConfig, sdk_client: Any = None):
        if not config.api_key:
            raise ConfigError(
                "API key not configured. Run 'committer setup' and edit "
                "~/.committer/config.yml to add your API key."
            )
        if not config.model:
            raise ConfigError("Model not configured. Add 'model' to ~/.committer/config.yml.")

        self.model = config.model
        # Retry policy belongs to the caller.
        self._client = sdk_client or Anthropic(api_key=config.api_key, max_retries=0)

    @property
    def name(self) -> str:
        return f"Claude ({self.model})"

    def _call_api(self, prompt: str, timeout: Optional[float]) -> dict:
        """Make a single API call and return the reply or an error payload."""
        kwargs = {}
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=self.MAX_TOKENS,
                messages=[{"role": "user", "content": prompt}],
                **kwargs,
            )
        except APITimeoutError as e:
            return error_payload("timeout_error", e)
        except APIConnectionError as e:
            return error_payload("connection_error", e)
        except APIError as e:
            return normalize_error_body(e.body)
        except ValueError as e:
            # Success status with a body that is not valid JSON.
            return error_payload("unknown_error", e)

        if isinstance(response, dict):
            return response
        if hasattr(response, "model_dump"):
            return response.model_dump()
        # Non-JSON content types come back from the SDK as raw text.
        return normalize_error_body(response)

    def send(self, prompt: str, timeout: Optional[float] = None) -> dict:
        logger.debug("Sending %d char prompt to %s", len(prompt), self.model)
        payload = self._call_api(prompt, timeout)
        return classify_reply(payload)
