"""
Generation client — one chat-completion request per README.

Talks to an OpenAI-compatible ``/chat/completions`` endpoint (Groq by
default).  Every failure is mapped onto the error taxonomy in
``readmegen.core.errors``; nothing is retried here.
"""

from __future__ import annotations

import json
import logging

import httpx

from readmegen.core.errors import (
    ApiError,
    ConfigurationError,
    InvalidResponse,
    NetworkError,
)
from readmegen.core.models.generation import GeneratedDocument, GenerationConfig
from readmegen.core.models.request import ProjectRequest
from readmegen.core.services.prompts import build_system_prompt, build_user_prompt

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30.0  # seconds

# Fixed sampling parameters
TEMPERATURE = 0.7
MAX_TOKENS = 4000
TOP_P = 1


class GenerationClient:
    """Builds the prompt and calls the generation endpoint.

    Args:
        http_client: Optional pre-built ``httpx.Client``.  When omitted a
            client is created per request and closed afterwards.
        system_prompt: Override for the system instruction.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        system_prompt: str | None = None,
    ):
        self._http = http_client
        self._system_prompt = system_prompt

    @property
    def system_prompt(self) -> str:
        if self._system_prompt is None:
            self._system_prompt = build_system_prompt()
        return self._system_prompt

    def build_payload(
        self,
        request: ProjectRequest,
        folder_structure: str | None,
        config: GenerationConfig,
    ) -> dict:
        return {
            "model": config.model,
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {
                    "role": "user",
                    "content": build_user_prompt(
                        request.overview, request.repo_link, folder_structure,
                    ),
                },
            ],
            "temperature": TEMPERATURE,
            "max_tokens": MAX_TOKENS,
            "top_p": TOP_P,
            "stream": False,
        }

    def generate(
        self,
        request: ProjectRequest,
        folder_structure: str | None,
        config: GenerationConfig,
    ) -> GeneratedDocument:
        """Generate README markdown for ``request``.

        Raises:
            ConfigurationError: No API key configured.
            NetworkError: The endpoint could not be reached in time.
            ApiError: The endpoint returned a non-success status.
            InvalidResponse: The body is not a chat completion.
        """
        if not config.has_api_key:
            raise ConfigurationError(
                "Groq API key is not configured. Set api_key in readmegen.yml, "
                "or GROQ_API_KEY in the environment or a .env file."
            )

        payload = self.build_payload(request, folder_structure, config)
        headers = {
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        }

        logger.info("Requesting README from %s (model=%s)", config.endpoint, config.model)
        response = self._post(config.endpoint, payload, headers)

        if not response.is_success:
            raise ApiError(response.status_code, _error_message(response))

        content = _extract_content(response)
        logger.info("README generated successfully (%d chars)", len(content))
        return GeneratedDocument(content=content)

    def _post(self, url: str, payload: dict, headers: dict) -> httpx.Response:
        try:
            if self._http is not None:
                return self._http.post(url, json=payload, headers=headers, timeout=REQUEST_TIMEOUT)
            with httpx.Client(timeout=REQUEST_TIMEOUT) as client:
                return client.post(url, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            logger.error("Request to %s timed out: %s", url, e)
            raise NetworkError(
                f"Network error: request timed out after {REQUEST_TIMEOUT:g}s"
            ) from e
        except httpx.RequestError as e:
            logger.error("Request to %s failed: %s", url, e)
            raise NetworkError("Network error: Unable to connect to the generation API") from e


def _error_message(response: httpx.Response) -> str:
    """Pull ``error.message`` out of an error body, if there is one."""
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "Unknown API error"
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(error, str) and error:
            return error
    return "Unknown API error"


def _extract_content(response: httpx.Response) -> str:
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidResponse("Invalid response from generation API: body is not JSON") from e

    choices = body.get("choices") if isinstance(body, dict) else None
    if not isinstance(choices, list) or not choices:
        raise InvalidResponse("Invalid response from generation API: no choices returned")

    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise InvalidResponse("Invalid response from generation API: missing message content")

    return content.strip()
