# FILE: specforge/llm/generator.py
"""
Spec generation client.

Wraps a single OpenAI-compatible chat completion:
- builds the instruction from (goal, users, constraints, template type)
- asks for a JSON-only response at temperature 0.7
- parses and validates the reply against GeneratedSpec

Any failure discards the whole generation. Transport/API errors become
GenerationError; unparsable or non-conforming output becomes
GenerationFormatError. The original cause is logged, never returned.

The client is a process-scoped singleton:
- init_generation_client(settings) on startup
- get_generation_client() as the FastAPI dependency
- close_generation_client() on shutdown
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from openai import OpenAI, OpenAIError
from pydantic import ValidationError as PydanticValidationError

from specforge.config import DEFAULT_MODEL, Settings
from specforge.errors import GenerationError, GenerationFormatError, ValidationError
from specforge.llm.schemas import GeneratedSpec

logger = logging.getLogger(__name__)

GENERATION_TEMPERATURE = 0.7

SYSTEM_PROMPT = (
    "You are a product manager helping to create detailed project specifications. "
    "Always respond with valid JSON only, no additional text."
)

RESPONSE_FORMAT_EXAMPLE = """{
  "user_stories": [
    {
      "title": "User story title",
      "description": "Detailed description of the user story",
      "tasks": [
        {
          "title": "Task title",
          "description": "Task description",
          "group": "Category name (e.g., Frontend, Backend, Database)"
        }
      ]
    }
  ],
  "risks": [
    "Risk description 1",
    "Risk description 2"
  ]
}"""


def build_prompt(
    goal: str,
    users: str,
    constraints: Optional[str],
    template_type: str,
) -> str:
    """Instruction text sent as the user message."""
    lines = [
        f"Generate a detailed project specification for a {template_type}.",
        "",
        f"Goal: {goal}",
        "",
        f"Target Users: {users}",
        "",
    ]
    if constraints:
        lines += [f"Constraints: {constraints}", ""]

    lines += [
        "Create a comprehensive specification with:",
        "1. User stories that break down the goal into features",
        "2. For each user story, create specific tasks grouped by category "
        '(e.g., "Frontend", "Backend", "Database", "Testing", "DevOps")',
        "3. Identify potential risks",
        "",
        "Respond with ONLY valid JSON in this exact format:",
        RESPONSE_FORMAT_EXAMPLE,
    ]
    return "\n".join(lines)


def parse_generation(content: Optional[str]) -> GeneratedSpec:
    """
    Parse and validate raw model output.

    Raises GenerationFormatError on empty output, invalid JSON, or any schema
    mismatch. No partial recovery.
    """
    if not content:
        logger.error("[generator] empty response from model")
        raise GenerationFormatError("Invalid response format from LLM")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.error("[generator] response is not valid JSON: %s", e)
        raise GenerationFormatError("Invalid response format from LLM") from e

    try:
        return GeneratedSpec.model_validate(data)
    except PydanticValidationError as e:
        logger.error("[generator] response failed schema validation: %s", e.errors())
        raise GenerationFormatError("Invalid response format from LLM") from e


class SpecGenerationClient:
    """Thin wrapper around the OpenAI chat completions API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        temperature: float = GENERATION_TEMPERATURE,
        client: Any = None,
    ):
        self.model = model
        self.temperature = temperature
        self._client = client if client is not None else OpenAI(api_key=api_key, base_url=base_url or None)

    def _messages(self, prompt: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

    def generate_spec(
        self,
        goal: str,
        users: str,
        constraints: Optional[str],
        template_type: str,
    ) -> GeneratedSpec:
        if not goal or not users or not template_type:
            raise ValidationError("goal, users, and templateType are required")

        prompt = build_prompt(goal, users, constraints, template_type)

        try:
            completion = self._client.chat.completions.create(
                model=self.model,
                messages=self._messages(prompt),
                response_format={"type": "json_object"},
                temperature=self.temperature,
            )
        except OpenAIError as e:
            logger.error("[generator] completion request failed: %s", e)
            raise GenerationError("Failed to generate specification") from e

        content = completion.choices[0].message.content if completion.choices else None
        generated = parse_generation(content)

        logger.info(
            "[generator] generated %d user stories, %d risks (model=%s)",
            len(generated.user_stories),
            len(generated.risks),
            self.model,
        )
        return generated

    def health_check(self) -> bool:
        """Minimal completion round trip. Reports reachability only; content is not validated."""
        try:
            completion = self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": 'Say "OK"'}],
                max_tokens=5,
            )
            return bool(completion.choices)
        except Exception as e:
            logger.error("[generator] health check failed: %s", e)
            return False

    def close(self) -> None:
        self._client.close()


# =============================================================================
# PROCESS-SCOPED SINGLETON
# =============================================================================

_client: Optional[SpecGenerationClient] = None


def init_generation_client(settings: Settings) -> SpecGenerationClient:
    global _client
    _client = SpecGenerationClient(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        model=settings.openai_model,
    )
    logger.info("[generator] client ready (model=%s)", settings.openai_model)
    return _client


def get_generation_client() -> SpecGenerationClient:
    """FastAPI dependency."""
    if _client is None:
        raise RuntimeError("Generation client not initialised; call init_generation_client() first")
    return _client


def close_generation_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        logger.info("[generator] client closed")
    _client = None
