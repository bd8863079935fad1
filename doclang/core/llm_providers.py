"""
LLM Provider abstraction and implementations
"""
from abc import ABC, abstractmethod
from typing import Optional
import asyncio
import os
import re
import httpx
import json

from doclang.config import (
    API_ENDPOINT, DEFAULT_MODEL, REQUEST_TIMEOUT, OLLAMA_NUM_CTX,
    MAX_TRANSLATION_ATTEMPTS, RETRY_DELAY_SECONDS, GEMINI_MODEL,
    TRANSLATE_TAG_IN, TRANSLATE_TAG_OUT
)


class LLMProvider(ABC):
    """Abstract base class for LLM providers"""

    provider_name = "llm"

    def __init__(self, model: str):
        self.model = model
        self._compiled_regex = re.compile(
            rf"{re.escape(TRANSLATE_TAG_IN)}(.*?){re.escape(TRANSLATE_TAG_OUT)}",
            re.DOTALL
        )

    @abstractmethod
    def build_request(self, prompt: str) -> dict:
        """Return the keyword arguments of the POST request for prompt"""
        pass

    @abstractmethod
    def parse_response(self, response_json: dict) -> str:
        """Extract the generated text from a decoded response body"""
        pass

    async def generate(self, prompt: str, timeout: int = REQUEST_TIMEOUT) -> Optional[str]:
        """Generate text from prompt, retrying on transport and decoding errors"""
        request_kwargs = self.build_request(prompt)

        async with httpx.AsyncClient() as client:
            for attempt in range(MAX_TRANSLATION_ATTEMPTS):
                try:
                    response = await client.post(timeout=timeout, **request_kwargs)
                    response.raise_for_status()
                    return self.parse_response(response.json())

                except httpx.TimeoutException as e:
                    print(f"{self.provider_name} API Timeout (attempt {attempt + 1}/{MAX_TRANSLATION_ATTEMPTS}): {e}")
                except httpx.HTTPStatusError as e:
                    print(f"{self.provider_name} API HTTP Error (attempt {attempt + 1}/{MAX_TRANSLATION_ATTEMPTS}): {e}")
                    print(f"Response details: Status {e.response.status_code}, Body: {e.response.text[:200]}...")
                except json.JSONDecodeError as e:
                    print(f"{self.provider_name} API JSON Decode Error (attempt {attempt + 1}/{MAX_TRANSLATION_ATTEMPTS}): {e}")
                except httpx.HTTPError as e:
                    print(f"{self.provider_name} API Error (attempt {attempt + 1}/{MAX_TRANSLATION_ATTEMPTS}): {e}")

                if attempt < MAX_TRANSLATION_ATTEMPTS - 1:
                    await asyncio.sleep(RETRY_DELAY_SECONDS)

        return None

    def extract_translation(self, response: str) -> Optional[str]:
        """Extract translation from response using configured tags"""
        if not response:
            return None

        match = self._compiled_regex.search(response)
        if match:
            # Strip line breaks only, leading indentation is content
            return match.group(1).strip("\r\n")
        return None

    async def translate_text(self, prompt: str) -> Optional[str]:
        """Complete translation workflow: request + extraction"""
        response = await self.generate(prompt)
        if response:
            return self.extract_translation(response)
        return None


class OllamaProvider(LLMProvider):
    """Ollama API provider"""

    provider_name = "Ollama"

    def __init__(self, api_endpoint: str = API_ENDPOINT, model: str = DEFAULT_MODEL):
        super().__init__(model)
        self.api_endpoint = api_endpoint

    def build_request(self, prompt: str) -> dict:
        return {
            "url": self.api_endpoint,
            "json": {
                "model": self.model,
                "prompt": prompt,
                "stream": False,
                "think": False,
                "options": {"num_ctx": OLLAMA_NUM_CTX}
            }
        }

    def parse_response(self, response_json: dict) -> str:
        return response_json.get("response", "")


class GeminiProvider(LLMProvider):
    """Google Gemini API provider"""

    provider_name = "Gemini"

    def __init__(self, api_key: str, model: str = GEMINI_MODEL):
        super().__init__(model)
        self.api_key = api_key

    @property
    def api_endpoint(self) -> str:
        return f"https://generativelanguage.googleapis.com/v1beta/models/{self.model}:generateContent"

    def build_request(self, prompt: str) -> dict:
        return {
            "url": self.api_endpoint,
            "headers": {
                "Content-Type": "application/json",
                "x-goog-api-key": self.api_key
            },
            "json": {
                "contents": [{
                    "parts": [{
                        "text": prompt
                    }]
                }],
                "generationConfig": {
                    "temperature": 0.3,
                    "maxOutputTokens": 8192
                }
            }
        }

    def parse_response(self, response_json: dict) -> str:
        # Extract text from Gemini response structure
        if "candidates" in response_json and response_json["candidates"]:
            content = response_json["candidates"][0].get("content", {})
            parts = content.get("parts", [])
            if parts:
                return parts[0].get("text", "")
        return ""


class OpenAICompatibleProvider(LLMProvider):
    """OpenAI chat completions API, or any server exposing the same route"""

    provider_name = "OpenAI"

    def __init__(self, api_endpoint: str, model: str = DEFAULT_MODEL, api_key: str = ""):
        super().__init__(model)
        self.api_endpoint = api_endpoint
        self.api_key = api_key

    def build_request(self, prompt: str) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return {
            "url": self.api_endpoint,
            "headers": headers,
            "json": {
                "model": self.model,
                "messages": [{"role": "user", "content": prompt}],
                "temperature": 0.3
            }
        }

    def parse_response(self, response_json: dict) -> str:
        choices = response_json.get("choices") or []
        if choices:
            return choices[0].get("message", {}).get("content", "") or ""
        return ""


def create_llm_provider(provider_type: str = "ollama", **kwargs) -> LLMProvider:
    """Factory function to create LLM providers"""
    # Auto-detect provider from model name if not explicitly set
    model = kwargs.get("model", DEFAULT_MODEL)
    if provider_type == "ollama" and model and model.startswith("gemini"):
        provider_type = "gemini"

    if provider_type.lower() == "ollama":
        return OllamaProvider(
            api_endpoint=kwargs.get("api_endpoint", API_ENDPOINT),
            model=kwargs.get("model", DEFAULT_MODEL)
        )
    elif provider_type.lower() == "gemini":
        api_key = kwargs.get("api_key") or os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ValueError("Gemini provider requires an API key. Set GEMINI_API_KEY environment variable or pass api_key parameter.")
        return GeminiProvider(
            api_key=api_key,
            model=kwargs.get("model", GEMINI_MODEL)
        )
    elif provider_type.lower() == "openai":
        return OpenAICompatibleProvider(
            api_endpoint=kwargs.get("api_endpoint", API_ENDPOINT),
            model=kwargs.get("model", DEFAULT_MODEL),
            api_key=kwargs.get("api_key") or os.getenv("OPENAI_API_KEY", "")
        )
    else:
        raise ValueError(f"Unknown provider type: {provider_type}")
