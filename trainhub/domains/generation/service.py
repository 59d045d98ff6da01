# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Assessment generation gateway.

Turns a material's text into a multiple-choice test or an open-ended
assignment by asking an LLM for schema-constrained JSON and validating the
reply before handing it back.

The gateway never touches the domain store. Callers persist a result with
DomainStore.add_assessment and fan it out with assign_assessment_to_course.

Error contract:
- GenerationConfigError: no API key configured. Raised before any request,
  message surfaced verbatim.
- GenerationError: every other failure (network, decoding, schema). The
  message is generic; the cause is logged and chained.
"""

import logging

from trainhub.core.config.settings import LLMSettings, get_settings
from trainhub.core.intelligence.llm import LLMClient
from trainhub.domains.generation.schemas import (
    ASSIGNMENT_RESPONSE_SCHEMA,
    TEST_RESPONSE_SCHEMA,
    GeneratedAssignment,
    GenerationFailure,
    json_schema_format,
    parse_assignment_response,
    parse_test_response,
)
from trainhub.models import AssessmentQuestion, AssessmentType

logger = logging.getLogger(__name__)

TEST_PROMPT = (
    "Based on the following content, generate a 5-question multiple-choice test. "
    "Each question must have exactly 4 options. "
    "Ensure the correct answer is one of the options. "
    "Use only information found in the content. "
    'Content: "{content}"'
)

ASSIGNMENT_PROMPT = (
    "Based on the following content, generate an open-ended assignment of 3 to 5 questions. "
    "Create a suitable title for the assignment. "
    "Use only information found in the content. "
    'Content: "{content}"'
)


class GenerationServiceError(Exception):
    """Base exception for generation errors."""

    pass


class GenerationConfigError(GenerationServiceError):
    """Raised when the generation API key is not configured."""

    def __init__(self) -> None:
        super().__init__("Generation API key is not configured.")


class GenerationError(GenerationServiceError):
    """Raised when generation fails for any reason other than configuration.

    Attributes:
        assessment_type: Which kind of assessment was being generated.
    """

    def __init__(self, assessment_type: AssessmentType) -> None:
        self.assessment_type = assessment_type
        label = assessment_type.value.lower()
        super().__init__(
            f"Could not generate {label}. Please check the content or API configuration."
        )


class _InvalidResponse(Exception):
    """Internal: the model replied, but the reply failed validation."""


class GenerationGateway:
    """Generates assessments from material content through an LLM.

    Attributes:
        settings: LLM settings holding the API key.
    """

    def __init__(
        self,
        llm_client: LLMClient | None = None,
        settings: LLMSettings | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            llm_client: LLM client. Created on first use if None.
            settings: LLM settings. Uses get_settings() if None.
        """
        self.settings = settings or get_settings().llm
        self._llm_client = llm_client

    @property
    def llm_client(self) -> LLMClient:
        if self._llm_client is None:
            self._llm_client = LLMClient(llm_settings=self.settings)
        return self._llm_client

    def _require_api_key(self) -> None:
        if not self.settings.has_api_key:
            logger.warning("Generation requested without an API key")
            raise GenerationConfigError()

    async def _request(self, prompt: str, schema_name: str, schema: dict) -> str:
        response = await self.llm_client.complete(
            prompt=prompt,
            temperature=self.settings.temperature,
            response_format=json_schema_format(schema_name, schema),
        )
        return response.content

    async def generate_test(self, content: str) -> list[AssessmentQuestion]:
        """Generate a five-question multiple-choice test.

        Args:
            content: Material text the questions must be drawn from.

        Returns:
            Validated questions, each with options and a correct answer.

        Raises:
            GenerationConfigError: If no API key is configured.
            GenerationError: If the request or validation fails.
        """
        self._require_api_key()

        try:
            raw = await self._request(
                TEST_PROMPT.format(content=content),
                "generated_test",
                TEST_RESPONSE_SCHEMA,
            )
            result = parse_test_response(raw)
            if isinstance(result, GenerationFailure):
                raise _InvalidResponse(result.reason)
        except Exception as e:
            logger.error("Test generation failed: content_length=%d, error=%s", len(content), str(e))
            raise GenerationError(AssessmentType.TEST) from e

        questions = [
            AssessmentQuestion(
                question=item.question,
                options=item.options,
                correct_answer=item.correct_answer,
            )
            for item in result.payload.questions
        ]
        logger.info("Test generated: questions=%d", len(questions))
        return questions

    async def generate_assignment(self, content: str) -> GeneratedAssignment:
        """Generate an open-ended assignment with a title.

        Args:
            content: Material text the questions must be drawn from.

        Returns:
            Validated assignment with a non-blank title and its questions.

        Raises:
            GenerationConfigError: If no API key is configured.
            GenerationError: If the request or validation fails.
        """
        self._require_api_key()

        try:
            raw = await self._request(
                ASSIGNMENT_PROMPT.format(content=content),
                "generated_assignment",
                ASSIGNMENT_RESPONSE_SCHEMA,
            )
            result = parse_assignment_response(raw)
            if isinstance(result, GenerationFailure):
                raise _InvalidResponse(result.reason)
        except Exception as e:
            logger.error("Assignment generation failed: content_length=%d, error=%s", len(content), str(e))
            raise GenerationError(AssessmentType.ASSIGNMENT) from e

        logger.info("Assignment generated: title=%s, questions=%d", result.payload.title, len(result.payload.questions))
        return result.payload
