# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""LLM client using LiteLLM for multi-provider support.

This module provides a thin completion interface over LiteLLM. The API key
is passed directly to acompletion() on every call rather than through
provider environment variables, so one process can hold the key in its
settings object only.

Example:
    >>> from trainhub.core.intelligence.llm import LLMClient
    >>> client = LLMClient()
    >>> response = await client.complete("Summarise the water cycle")
    >>> print(response.content)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import litellm
from litellm import acompletion

from trainhub.core.config.settings import LLMSettings, get_settings

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Response from an LLM completion.

    Attributes:
        content: The generated text content.
        model: The model that generated the response.
        tokens_input: Number of input tokens used.
        tokens_output: Number of output tokens generated.
        finish_reason: Why generation stopped (stop, length, etc.).
        raw_response: Original response object from LiteLLM.
    """

    content: str
    model: str
    tokens_input: int = 0
    tokens_output: int = 0
    finish_reason: str = "stop"
    raw_response: Optional[object] = field(default=None, repr=False)

    @property
    def total_tokens(self) -> int:
        """Get total tokens used (input + output)."""
        return self.tokens_input + self.tokens_output


class LLMError(Exception):
    """Exception raised when LLM operation fails.

    Attributes:
        message: Error description.
        model: Model that caused the error.
        original_error: Original exception if any.
    """

    def __init__(
        self,
        message: str,
        model: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """Initialize LLMError.

        Args:
            message: Error description.
            model: Model that caused the error.
            original_error: Original exception if any.
        """
        self.message = message
        self.model = model
        self.original_error = original_error
        super().__init__(self.message)


class LLMClient:
    """Client for LLM completions via LiteLLM.

    Attributes:
        model: Default model to use for completions.
        timeout: Request timeout in seconds.
        max_retries: Maximum retry attempts.

    Example:
        >>> client = LLMClient(model="gemini/gemini-2.5-flash")
        >>> response = await client.complete(
        ...     prompt="List three prime numbers",
        ...     temperature=0.2,
        ... )
    """

    def __init__(
        self,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        llm_settings: Optional[LLMSettings] = None,
    ):
        """Initialize the LLM client.

        Args:
            model: Default model in LiteLLM format. Falls back to settings.
            timeout: Request timeout in seconds. Falls back to settings.
            max_retries: Maximum retry attempts. Falls back to settings.
            llm_settings: LLM configuration. Uses get_settings() if None.
        """
        self._settings = llm_settings or get_settings().llm

        self._model = model or self._settings.default_model
        self._timeout = timeout or self._settings.request_timeout
        self._max_retries = max_retries if max_retries is not None else self._settings.max_retries

        self._configure_litellm()

        logger.info(
            "LLMClient initialized with model=%s, timeout=%.1fs, max_retries=%d",
            self._model,
            self._timeout,
            self._max_retries,
        )

    def _configure_litellm(self) -> None:
        """Configure LiteLLM global settings."""
        litellm.drop_params = True

    def _get_provider_params(self) -> dict[str, Any]:
        """Get the credentials to pass to acompletion().

        Returns:
            Dictionary with api_key if one is configured.
        """
        if self._settings.has_api_key:
            return {"api_key": self._settings.google_api_key.get_secret_value()}
        return {}

    @property
    def model(self) -> str:
        """Get the default model in LiteLLM format."""
        return self._model

    @property
    def timeout(self) -> float:
        """Get the request timeout in seconds."""
        return self._timeout

    @property
    def max_retries(self) -> int:
        """Get the maximum retry count."""
        return self._max_retries

    async def complete(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 2048,
        response_format: Optional[dict[str, Any]] = None,
    ) -> LLMResponse:
        """Generate a single-turn completion for the given prompt.

        Args:
            prompt: User prompt text.
            temperature: Sampling temperature (0-2).
            max_tokens: Maximum tokens to generate.
            response_format: Structured output request, e.g. a json_schema
                response format.

        Returns:
            LLMResponse with generated content and metadata.

        Raises:
            LLMError: If generation fails after retries.
            ValueError: If prompt is empty.
        """
        if not prompt or not prompt.strip():
            raise ValueError("Prompt cannot be empty")

        request_params = self._get_provider_params()
        if response_format is not None:
            request_params["response_format"] = response_format

        try:
            response = await acompletion(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens,
                timeout=self._timeout,
                num_retries=self._max_retries,
                **request_params,
            )

            content = response.choices[0].message.content or ""
            finish_reason = response.choices[0].finish_reason or "stop"

            usage = getattr(response, "usage", None)
            tokens_input = getattr(usage, "prompt_tokens", 0) or 0
            tokens_output = getattr(usage, "completion_tokens", 0) or 0

            logger.debug(
                "Completion generated: model=%s, tokens_in=%d, tokens_out=%d",
                self._model,
                tokens_input,
                tokens_output,
            )

            return LLMResponse(
                content=content,
                model=self._model,
                tokens_input=tokens_input,
                tokens_output=tokens_output,
                finish_reason=finish_reason,
                raw_response=response,
            )

        except Exception as e:
            logger.error(
                "Completion failed: model=%s, prompt_length=%d, error=%s",
                self._model,
                len(prompt),
                str(e),
            )
            raise LLMError(
                message=f"Completion failed: {str(e)}",
                model=self._model,
                original_error=e,
            ) from e

    def __repr__(self) -> str:
        return f"LLMClient(model={self._model!r}, timeout={self._timeout})"
