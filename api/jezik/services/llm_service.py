"""
Helper functions for Gemini API calls.
"""
import requests
import json
import logging
from typing import Optional, Any

from jezik.core.config import settings
from jezik.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


def strip_markdown_fences(text: str) -> str:
    """
    Remove a surrounding markdown code block (```json ... ```) if present.

    Args:
        text: Raw model output

    Returns:
        Text without the fence lines
    """
    text = text.strip()
    if text.startswith('```'):
        lines = text.split('\n')
        text = '\n'.join(lines[1:])
        if text.rstrip().endswith('```'):
            text = text.rstrip()[:-3]
    return text.strip()


def parse_json_response(text: str) -> Any:
    """
    Parse a JSON reply from the model.

    Raises:
        UpstreamError: If the reply is not valid JSON
    """
    cleaned = strip_markdown_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse LLM JSON response: {e}")
        logger.error(f"Response text: {cleaned[:500]}")
        raise UpstreamError(f"LLM returned invalid JSON: {str(e)}")


def call_gemini_api(
    prompt: str,
    system_instruction: Optional[str] = None,
    json_response: bool = True,
) -> Any:
    """
    Call the Gemini API.

    Args:
        prompt: The prompt to send to the LLM
        system_instruction: Optional system instruction to provide context
        json_response: Ask for and parse a JSON reply; otherwise return the text

    Returns:
        Parsed JSON (json_response=True) or the stripped reply text, which may be empty

    Raises:
        UpstreamError: If the key is missing, the request fails, or the response is malformed
    """
    api_key = settings.google_gemini_api_key
    if not api_key:
        raise UpstreamError("Google Gemini API key not configured")

    model_name = settings.gemini_model
    base_url = f"{GEMINI_BASE_URL}/{model_name}:generateContent"

    generation_config = {
        "temperature": 0.7,
        "topK": 40,
        "topP": 0.95,
        "maxOutputTokens": 4096,
    }
    if json_response:
        generation_config["responseMimeType"] = "application/json"

    payload = {
        "contents": [{
            "parts": [{
                "text": prompt
            }]
        }],
        "generationConfig": generation_config,
    }

    # Add system instruction if provided
    if system_instruction:
        payload["systemInstruction"] = {
            "parts": [{
                "text": system_instruction
            }]
        }

    try:
        response = requests.post(
            base_url,
            params={"key": api_key},
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=settings.llm_timeout_seconds
        )
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        error_msg = f"Gemini API request failed: {str(e)}"
        if getattr(e, 'response', None) is not None:
            try:
                error_data = e.response.json()
                error_msg += f" - {error_data}"
            except ValueError:
                error_msg += f" - Status: {e.response.status_code}"
        logger.error(error_msg)
        raise UpstreamError(error_msg)
    except ValueError as e:
        logger.error(f"Gemini API returned a non-JSON body: {e}")
        raise UpstreamError(f"Gemini API returned a non-JSON body: {str(e)}")

    if not isinstance(data, dict):
        raise UpstreamError("LLM response malformed: body is not an object")

    usage_metadata = data.get('usageMetadata')
    if isinstance(usage_metadata, dict):
        logger.debug(
            f"Gemini call used {usage_metadata.get('promptTokenCount', 0)} prompt tokens, "
            f"{usage_metadata.get('candidatesTokenCount', 0)} output tokens"
        )

    candidates = data.get('candidates') or []
    if not isinstance(candidates, list) or not candidates:
        raise UpstreamError("LLM response missing candidates")
    if not isinstance(candidates[0], dict):
        raise UpstreamError("LLM response malformed: candidate is not an object")

    content = candidates[0].get('content') or {}
    parts = content.get('parts') if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts:
        raise UpstreamError("LLM response missing content or parts")
    if not isinstance(parts[0], dict):
        raise UpstreamError("LLM response malformed: part is not an object")

    text = parts[0].get('text') or ''
    if not isinstance(text, str):
        raise UpstreamError("LLM response malformed: text is not a string")
    text = text.strip()

    if not json_response:
        return text

    if not text:
        raise UpstreamError("LLM returned empty response")

    return parse_json_response(text)
