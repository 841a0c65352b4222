from abc import ABC, abstractmethod
from typing import Optional

import httpx

from utility.logging_config import setup_logger
from utility.settings import DEFAULT_ENDPOINT, DEFAULT_MODEL

logger = setup_logger(__name__)


class TranslationProvider(ABC):
    """
    Single-call completion capability the router depends on.
    Any LLM backend can stand behind it.
    """

    @abstractmethod
    async def complete(
        self,
        system_instruction: str,
        user_message: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        """Return the model's text, or an empty string when it produced none."""


class AsyncExternalLLM(TranslationProvider):
    """
    Async OpenRouter chat-completion client.
    One request per call: no streaming, no retry.
    """

    def __init__(
        self,
        api_key: str = None,
        model: str = DEFAULT_MODEL,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise ValueError("API key must be provided or set in OPENROUTER_API_KEY")
        self.api_key = api_key
        self.model = model
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport
        self.headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": "http://localhost:3000",  # Required for some providers
            "X-Title": "Short Text Translator",  # Helps with routing
        }

    @classmethod
    def from_settings(cls, settings) -> "AsyncExternalLLM":
        return cls(
            api_key=settings.openrouter_api_key,
            model=settings.model,
            endpoint=settings.endpoint,
            timeout=settings.provider_timeout,
        )

    def _client(self) -> httpx.AsyncClient:
        if self.timeout is None:
            return httpx.AsyncClient(transport=self._transport)
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def complete(
        self,
        system_instruction: str,
        user_message: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_instruction},
                {"role": "user", "content": user_message},
            ],
            "temperature": temperature,
            "max_tokens": max_output_tokens,
            "stream": False,
        }

        logger.debug("POST %s (model=%s)", self.endpoint, self.model)
        async with self._client() as client:
            response = await client.post(self.endpoint, headers=self.headers, json=payload)
            response.raise_for_status()
            data = response.json()

        choices = data.get("choices") or [{}]
        content = (choices[0].get("message") or {}).get("content")
        return content or ""
