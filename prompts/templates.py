"""Prompt templates for idea generation."""

from __future__ import annotations

from string import Template

# --- Idea list template ---

IDEA_LIST = Template(
    'Generate a numbered list of 5 creative and unique ideas for the following topic: "$prompt". '
    "Return only the numbered list, without any introductory text."
)


# Map of named templates
TEMPLATES: dict[str, Template] = {
    "idea_list": IDEA_LIST,
}
