# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Generation response schemas.

Two views of the same contract live here:

- JSON schemas sent to the model as the requested response format.
- Pydantic payload models that validate what actually came back.

Parsing never raises. It returns either GenerationSuccess carrying a fully
validated payload or GenerationFailure carrying the reason, so a partially
malformed response can never be mistaken for a usable one.
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

TEST_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "questions": {
            "type": "array",
            "description": "An array of test questions.",
            "items": {
                "type": "object",
                "properties": {
                    "question": {
                        "type": "string",
                        "description": "The question text.",
                    },
                    "options": {
                        "type": "array",
                        "description": "An array of 4 possible answers.",
                        "items": {"type": "string"},
                    },
                    "correctAnswer": {
                        "type": "string",
                        "description": "The correct answer from the options array.",
                    },
                },
                "required": ["question", "options", "correctAnswer"],
            },
        },
    },
    "required": ["questions"],
}

ASSIGNMENT_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {
            "type": "string",
            "description": "A concise title for the assignment.",
        },
        "questions": {
            "type": "array",
            "description": "An array of 3 to 5 open-ended assignment questions.",
            "items": {
                "type": "object",
                "properties": {
                    "question": {
                        "type": "string",
                        "description": "The open-ended question text.",
                    },
                },
                "required": ["question"],
            },
        },
    },
    "required": ["title", "questions"],
}


def json_schema_format(name: str, schema: dict[str, Any]) -> dict[str, Any]:
    """Wrap a JSON schema as a LiteLLM structured-output response format."""
    return {
        "type": "json_schema",
        "json_schema": {"name": name, "schema": schema},
    }


class GeneratedTestQuestion(BaseModel):
    """A multiple-choice question as returned by the model."""

    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(min_length=1)
    options: list[str] = Field(min_length=1)
    correct_answer: str = Field(alias="correctAnswer")

    @model_validator(mode="after")
    def check_answer_is_an_option(self) -> "GeneratedTestQuestion":
        """The correct answer must be one of the offered options."""
        if self.correct_answer not in self.options:
            raise ValueError("correctAnswer is not one of the options")
        return self


class GeneratedTest(BaseModel):
    """Validated test payload."""

    questions: list[GeneratedTestQuestion]


class GeneratedAssignmentQuestion(BaseModel):
    """An open-ended question as returned by the model."""

    question: str = Field(min_length=1)


class GeneratedAssignment(BaseModel):
    """Validated assignment payload."""

    title: str
    questions: list[GeneratedAssignmentQuestion]

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        """Reject blank titles."""
        if not value.strip():
            raise ValueError("title must not be blank")
        return value.strip()


PayloadT = TypeVar("PayloadT", bound=BaseModel)


class GenerationSuccess(BaseModel, Generic[PayloadT]):
    """A response that passed validation."""

    kind: Literal["success"] = "success"
    payload: PayloadT


class GenerationFailure(BaseModel):
    """A response that failed to decode or validate."""

    kind: Literal["failure"] = "failure"
    reason: str


def _parse(raw: str, model: type[PayloadT]) -> GenerationSuccess[PayloadT] | GenerationFailure:
    try:
        payload = model.model_validate_json(raw)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "response"
        return GenerationFailure(reason=f"{location}: {first['msg']}")
    return GenerationSuccess[model](payload=payload)


def parse_test_response(raw: str) -> GenerationSuccess[GeneratedTest] | GenerationFailure:
    """Decode and validate raw model output as a test.

    Args:
        raw: Response text, expected to be a JSON object.

    Returns:
        GenerationSuccess with a GeneratedTest, or GenerationFailure.
    """
    return _parse(raw, GeneratedTest)


def parse_assignment_response(raw: str) -> GenerationSuccess[GeneratedAssignment] | GenerationFailure:
    """Decode and validate raw model output as an assignment.

    Args:
        raw: Response text, expected to be a JSON object.

    Returns:
        GenerationSuccess with a GeneratedAssignment, or GenerationFailure.
    """
    return _parse(raw, GeneratedAssignment)
