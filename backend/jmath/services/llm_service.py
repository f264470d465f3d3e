import logging
import time
from typing import Any, Dict, Optional

import httpx

from jmath.core.config import Settings
from jmath.core.errors import ConfigurationError, UpstreamError
from jmath.models.schemas import ChatCompletionRequest, ChatMessage

logger = logging.getLogger(__name__)


class OpenRouterClient:
    """Single-shot chat-completion client for the OpenRouter API"""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        self.settings = settings
        self.http_client = http_client

    def _headers(self, title: Optional[str] = None) -> Dict[str, str]:
        app_title = f"{self.settings.APP_NAME} ({title})" if title else self.settings.APP_NAME
        return {
            "Authorization": f"Bearer {self.settings.OPENROUTER_API_KEY}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.settings.SITE_URL,
            "X-Title": app_title,
        }

    def build_payload(self, prompt: str, json_mode: bool = False) -> Dict[str, Any]:
        request = ChatCompletionRequest(
            model=self.settings.OPENROUTER_MODEL,
            messages=[ChatMessage(role="user", content=prompt)],
            response_format={"type": "json_object"} if json_mode else None,
        )
        return request.model_dump(exclude_none=True)

    async def complete(
        self,
        prompt: str,
        *,
        title: Optional[str] = None,
        json_mode: bool = False
    ) -> Optional[str]:
        """
        Send one prompt and return the first choice's message content.

        Raises ConfigurationError without touching the network when no API key
        is set, and UpstreamError when the API answers with a non-2xx status.
        Transport errors propagate unchanged. Nothing is retried.
        """
        if not self.settings.is_configured:
            raise ConfigurationError()

        start_time = time.time()
        logger.info(f"🤖 Calling {self.settings.OPENROUTER_MODEL} ({title or 'solve'}, json_mode={json_mode})")

        response = await self.http_client.post(
            self.settings.completions_url,
            json=self.build_payload(prompt, json_mode),
            headers=self._headers(title),
        )

        if not response.is_success:
            raise self._upstream_error(response, title)

        data = response.json()
        logger.info(f"✅ Completion received in {time.time() - start_time:.2f}s")
        return self._first_choice_content(data)

    def _upstream_error(self, response: httpx.Response, title: Optional[str]) -> UpstreamError:
        try:
            error_data = response.json()
        except ValueError:
            error_data = response.text

        logger.error(f"OpenRouter API Error ({title or 'solve'}): {response.status_code} {error_data}")

        message = None
        if isinstance(error_data, dict) and isinstance(error_data.get("error"), dict):
            message = error_data["error"].get("message")
        return UpstreamError(response.status_code, message or response.reason_phrase)

    @staticmethod
    def _first_choice_content(data: Any) -> Optional[str]:
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        # multi-part content arrays are not a usable completion
        return content if isinstance(content, str) else None
