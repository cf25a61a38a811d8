# FILE: specforge/llm/schemas.py
"""
Shape of the JSON object the model must return.

{
  "user_stories": [
    {"title": str, "description": str,
     "tasks": [{"title": str, "description": str, "group": str}]}
  ],
  "risks": [str]
}

StrictStr means a number or null where a string is expected fails
validation instead of being coerced. Unknown extra keys are ignored.
"""
from typing import List
from pydantic import BaseModel, StrictStr


class GeneratedTask(BaseModel):
    title: StrictStr
    description: StrictStr
    group: StrictStr


class GeneratedUserStory(BaseModel):
    title: StrictStr
    description: StrictStr
    tasks: List[GeneratedTask]


class GeneratedSpec(BaseModel):
    user_stories: List[GeneratedUserStory]
    risks: List[StrictStr]
