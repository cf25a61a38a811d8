# FILE: specforge/specs/__init__.py
"""
Specs module: storage, service functions, markdown export and the HTTP router.

Usage:
    from specforge.specs import generate_and_create_spec, spec_to_markdown

    spec = generate_and_create_spec(db, generator, SpecCreate(goal=..., users=..., template_type="Web App"))
    markdown = spec_to_markdown(spec)
"""

# Database models
from .models import Spec, UserStory, Task, Risk

# Service functions
from .service import (
    MoveDirection,
    RECENT_SPECS_LIMIT,
    generate_and_create_spec,
    create_spec,
    list_recent_specs,
    get_spec,
    get_task,
    update_task,
    move_task,
)

# Export
from .export import spec_to_markdown, export_spec_markdown

__all__ = [
    "Spec",
    "UserStory",
    "Task",
    "Risk",
    "MoveDirection",
    "RECENT_SPECS_LIMIT",
    "generate_and_create_spec",
    "create_spec",
    "list_recent_specs",
    "get_spec",
    "get_task",
    "update_task",
    "move_task",
    "spec_to_markdown",
    "export_spec_markdown",
]
