"""Generative AI model client (calls an OpenAI compatible chat completions API directly)."""

from typing import Optional, List, Any
from openai import OpenAI
from peernotes.config import settings


class AIClient:
    """Single-model client. No fallback across models and no retries."""

    def __init__(
        self,
        model_name: Optional[str] = None,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        temperature: Optional[float] = None,
    ):
        self.model_name = model_name or settings.AI_MODERATION_MODEL
        self.base_url = base_url or settings.AI_BASE_URL
        self.api_key = api_key if api_key is not None else settings.AI_API_KEY
        self.temperature = settings.AI_TEMPERATURE if temperature is None else temperature
        self._client = None

    def _get_client(self) -> OpenAI:
        if self._client is None:
            if not self.api_key:
                raise RuntimeError("AI_API_KEY is not configured.")
            self._client = OpenAI(api_key=self.api_key, base_url=self.base_url)
        return self._client

    def _normalize_content(self, content: Any) -> str:
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            chunks: List[str] = []
            for part in content:
                if isinstance(part, dict) and part.get("type") == "text":
                    chunks.append(str(part.get("text", "")))
            return "".join(chunks)
        return str(content or "")

    def invoke(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        response = self._get_client().chat.completions.create(
            model=self.model_name,
            messages=messages,
            temperature=self.temperature,
        )
        if not response.choices:
            return ""
        message = response.choices[0].message
        return self._normalize_content(message.content if message else "")

    @classmethod
    def get_client(cls) -> "AIClient":
        return cls(model_name=settings.AI_MODERATION_MODEL)
