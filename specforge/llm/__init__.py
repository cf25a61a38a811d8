"""
LLM generation for SpecForge.

Usage:
    from specforge.llm import SpecGenerationClient

    client = SpecGenerationClient(api_key="...", model="gpt-4o-mini")
    generated = client.generate_spec(goal, users, constraints, "Web App")
"""
from .schemas import GeneratedSpec, GeneratedUserStory, GeneratedTask
from .generator import (
    GENERATION_TEMPERATURE,
    SpecGenerationClient,
    build_prompt,
    parse_generation,
    init_generation_client,
    get_generation_client,
    close_generation_client,
)

__all__ = [
    "GeneratedSpec",
    "GeneratedUserStory",
    "GeneratedTask",
    "GENERATION_TEMPERATURE",
    "SpecGenerationClient",
    "build_prompt",
    "parse_generation",
    "init_generation_client",
    "get_generation_client",
    "close_generation_client",
]
