"""
Translation module for LLM communication
"""
import time

from doclang.config import DEFAULT_MODEL
from prompts import generate_translation_prompt
from .llm_client import LLMClient
from typing import Optional


async def translate_content(content, source_language="en", target_language="fr", model=DEFAULT_MODEL,
                            llm_client=None, log_callback=None, custom_instructions="") -> Optional[str]:
    """
    Send a documentation fragment to the LLM and return its translation

    Args:
        content (str): Text to translate
        source_language (str): Source language code
        target_language (str): Target language code
        model (str): LLM model name
        llm_client (LLMClient): Client to use, a local Ollama client if None
        log_callback (callable): Logging callback function
        custom_instructions (str): Additional translation instructions

    Returns:
        str: Translated text or None if failed
    """
    structured_prompt = generate_translation_prompt(
        content,
        source_language,
        target_language,
        custom_instructions=custom_instructions
    )

    if log_callback:
        log_callback("llm_request", "LLM Request", {'type': 'llm_request', 'model': model, 'prompt': structured_prompt})

    start_time = time.time()
    client = llm_client or LLMClient(model=model)
    full_raw_response = await client.make_request(structured_prompt, model)
    execution_time = time.time() - start_time

    if not full_raw_response:
        if log_callback:
            log_callback("llm_api_error", "ERROR: LLM API request failed")
        return None

    if log_callback:
        log_callback("llm_response", "LLM Response",
                     {'type': 'llm_response', 'response': full_raw_response, 'execution_time': execution_time})

    translated_text = client.extract_translation(full_raw_response)
    if translated_text:
        return translated_text

    if log_callback:
        log_callback("llm_tag_warning", "WARNING: Translation tags missing in LLM response.")
        log_callback("llm_raw_response_preview", f"LLM raw response: {full_raw_response[:500]}...")

    if content in full_raw_response:
        if log_callback:
            log_callback("llm_prompt_in_response_warning", "WARNING: LLM response seems to contain input. Discarded.")
        return None
    return full_raw_response.strip("\r\n")
