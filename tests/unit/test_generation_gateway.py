# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for GenerationGateway."""

import json
from unittest.mock import MagicMock

import pytest

from trainhub.core.config.settings import LLMSettings
from trainhub.core.intelligence.llm import LLMError
from trainhub.domains.generation import (
    GenerationConfigError,
    GenerationError,
    GenerationGateway,
)
from trainhub.models import AssessmentQuestion

TEST_REPLY = json.dumps(
    {
        "questions": [
            {
                "question": "Which keyword defines a function?",
                "options": ["def", "func", "lambda", "fn"],
                "correctAnswer": "def",
            },
            {
                "question": "What delimits blocks?",
                "options": ["Braces", "Indentation", "Semicolons", "Keywords"],
                "correctAnswer": "Indentation",
            },
        ]
    }
)

ASSIGNMENT_REPLY = json.dumps(
    {
        "title": "Python Foundations",
        "questions": [
            {"question": "Explain dynamic typing."},
            {"question": "Compare lists and tuples."},
            {"question": "Describe how functions return several values."},
        ],
    }
)


class TestGenerateTest:
    """Tests for generate_test."""

    @pytest.mark.asyncio
    async def test_returns_questions(
        self, mock_llm_client: MagicMock, llm_settings: LLMSettings, llm_reply
    ) -> None:
        """Test that a valid reply becomes assessment questions."""
        mock_llm_client.complete.return_value = llm_reply(TEST_REPLY)
        gateway = GenerationGateway(llm_client=mock_llm_client, settings=llm_settings)

        questions = await gateway.generate_test("Python content")

        assert len(questions) == 2
        assert all(isinstance(q, AssessmentQuestion) for q in questions)
        assert questions[1].correct_answer == "Indentation"
        assert questions[1].options == ("Braces", "Indentation", "Semicolons", "Keywords")

    @pytest.mark.asyncio
    async def test_request_carries_content_and_schema(
        self, mock_llm_client: MagicMock, llm_settings: LLMSettings, llm_reply
    ) -> None:
        """Test that the prompt embeds the content and asks for the test schema."""
        mock_llm_client.complete.return_value = llm_reply(TEST_REPLY)
        gateway = GenerationGateway(llm_client=mock_llm_client, settings=llm_settings)

        await gateway.generate_test("Variables are dynamically typed.")

        kwargs = mock_llm_client.complete.call_args.kwargs
        assert "Variables are dynamically typed." in kwargs["prompt"]
        assert "5-question multiple-choice test" in kwargs["prompt"]
        assert kwargs["response_format"]["type"] == "json_schema"
        assert kwargs["response_format"]["json_schema"]["name"] == "generated_test"
        assert kwargs["temperature"] == llm_settings.temperature

    @pytest.mark.asyncio
    async def test_without_api_key_makes_no_request(
        self, mock_llm_client: MagicMock, llm_settings_without_key: LLMSettings
    ) -> None:
        """Test that a missing key fails before any network call."""
        gateway = GenerationGateway(llm_client=mock_llm_client, settings=llm_settings_without_key)

        with pytest.raises(GenerationConfigError) as exc_info:
            await gateway.generate_test("content")

        assert str(exc_info.value) == "Generation API key is not configured."
        mock_llm_client.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_api_key_counts_as_missing(self, mock_llm_client: MagicMock) -> None:
        """Test that a whitespace key is treated as not configured."""
        gateway = GenerationGateway(
            llm_client=mock_llm_client,
            settings=LLMSettings(google_api_key="   "),
        )

        with pytest.raises(GenerationConfigError):
            await gateway.generate_test("content")

        mock_llm_client.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_questions_raises_generation_error(
        self, mock_llm_client: MagicMock, llm_settings: LLMSettings, llm_reply
    ) -> None:
        """Test that a reply without questions is a generation failure."""
        mock_llm_client.complete.return_value = llm_reply('{"title": "oops"}')
        gateway = GenerationGateway(llm_client=mock_llm_client, settings=llm_settings)

        with pytest.raises(GenerationError) as exc_info:
            await gateway.generate_test("content")

        assert str(exc_info.value) == (
            "Could not generate test. Please check the content or API configuration."
        )

    @pytest.mark.asyncio
    async def test_llm_failure_is_wrapped(
        self, mock_llm_client: MagicMock, llm_settings: LLMSettings
    ) -> None:
        """Test that client errors surface as GenerationError with the cause chained."""
        cause = LLMError("Completion failed: timeout", model="gemini/test-model")
        mock_llm_client.complete.side_effect = cause
        gateway = GenerationGateway(llm_client=mock_llm_client, settings=llm_settings)

        with pytest.raises(GenerationError) as exc_info:
            await gateway.generate_test("content")

        assert exc_info.value.__cause__ is cause

    @pytest.mark.asyncio
    async def test_partially_malformed_reply_is_rejected(
        self, mock_llm_client: MagicMock, llm_settings: LLMSettings, llm_reply
    ) -> None:
        """Test that one bad question rejects the whole reply."""
        payload = json.loads(TEST_REPLY)
        payload["questions"][1]["correctAnswer"] = "Tabs"
        mock_llm_client.complete.return_value = llm_reply(json.dumps(payload))
        gateway = GenerationGateway(llm_client=mock_llm_client, settings=llm_settings)

        with pytest.raises(GenerationError):
            await gateway.generate_test("content")


class TestGenerateAssignment:
    """Tests for generate_assignment."""

    @pytest.mark.asyncio
    async def test_returns_titled_assignment(
        self, mock_llm_client: MagicMock, llm_settings: LLMSettings, llm_reply
    ) -> None:
        """Test that a valid reply becomes a titled assignment."""
        mock_llm_client.complete.return_value = llm_reply(ASSIGNMENT_REPLY)
        gateway = GenerationGateway(llm_client=mock_llm_client, settings=llm_settings)

        assignment = await gateway.generate_assignment("Python content")

        assert assignment.title == "Python Foundations"
        assert len(assignment.questions) == 3
        kwargs = mock_llm_client.complete.call_args.kwargs
        assert kwargs["response_format"]["json_schema"]["name"] == "generated_assignment"

    @pytest.mark.asyncio
    async def test_without_api_key_makes_no_request(
        self, mock_llm_client: MagicMock, llm_settings_without_key: LLMSettings
    ) -> None:
        """Test that a missing key fails before any network call."""
        gateway = GenerationGateway(llm_client=mock_llm_client, settings=llm_settings_without_key)

        with pytest.raises(GenerationConfigError):
            await gateway.generate_assignment("content")

        mock_llm_client.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_title_raises_generation_error(
        self, mock_llm_client: MagicMock, llm_settings: LLMSettings, llm_reply
    ) -> None:
        """Test that an empty title is a generation failure."""
        mock_llm_client.complete.return_value = llm_reply(
            json.dumps({"title": "", "questions": [{"question": "Q?"}]})
        )
        gateway = GenerationGateway(llm_client=mock_llm_client, settings=llm_settings)

        with pytest.raises(GenerationError) as exc_info:
            await gateway.generate_assignment("content")

        assert str(exc_info.value) == (
            "Could not generate assignment. Please check the content or API configuration."
        )


class TestGatewayClient:
    """Tests for lazy client creation."""

    def test_client_created_from_settings(self, llm_settings: LLMSettings) -> None:
        """Test that the gateway builds its own client on first use."""
        gateway = GenerationGateway(settings=llm_settings)

        client = gateway.llm_client

        assert client.model == "gemini/test-model"
        assert gateway.llm_client is client
