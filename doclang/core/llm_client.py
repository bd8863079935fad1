"""
Centralized LLM client for all API communication
"""
from typing import Optional

from doclang.config import API_ENDPOINT, DEFAULT_MODEL
from doclang.core.llm_providers import create_llm_provider, LLMProvider


class LLMClient:
    """Centralized client for LLM API communication"""

    def __init__(self, provider_type: str = "ollama", **kwargs):
        self.provider_type = provider_type
        self.provider_kwargs = kwargs
        self._provider: Optional[LLMProvider] = None
        self.api_endpoint = kwargs.get("api_endpoint", API_ENDPOINT)
        self.model = kwargs.get("model", DEFAULT_MODEL)

    def _get_provider(self) -> LLMProvider:
        """Get or create the LLM provider"""
        if not self._provider:
            self._provider = create_llm_provider(self.provider_type, **self.provider_kwargs)
        return self._provider

    async def make_request(self, prompt: str, model: Optional[str] = None,
                           timeout: Optional[int] = None) -> Optional[str]:
        """
        Make a request to the LLM API with error handling and retries

        Args:
            prompt: The prompt to send
            model: Model to use (defaults to instance model)
            timeout: Request timeout in seconds

        Returns:
            Raw response text or None if failed
        """
        provider = self._get_provider()

        if model:
            provider.model = model

        if timeout:
            return await provider.generate(prompt, timeout)
        return await provider.generate(prompt)

    def extract_translation(self, response: str) -> Optional[str]:
        """Extract translation from response using configured tags"""
        provider = self._get_provider()
        return provider.extract_translation(response)


def create_llm_client(llm_provider: str, api_endpoint: str, model_name: str,
                      gemini_api_key: Optional[str] = None,
                      openai_api_key: Optional[str] = None) -> LLMClient:
    """
    Factory function to create LLM client based on provider

    Args:
        llm_provider: Provider type ('ollama', 'gemini' or 'openai')
        api_endpoint: API endpoint for Ollama or OpenAI compatible servers
        model_name: Model name to use
        gemini_api_key: API key for Gemini provider
        openai_api_key: API key for OpenAI provider

    Returns:
        LLMClient instance
    """
    if llm_provider == "gemini":
        return LLMClient(provider_type="gemini", api_key=gemini_api_key, model=model_name)
    if llm_provider == "openai":
        return LLMClient(provider_type="openai", api_endpoint=api_endpoint, model=model_name,
                         api_key=openai_api_key)
    return LLMClient(provider_type="ollama", api_endpoint=api_endpoint, model=model_name)
