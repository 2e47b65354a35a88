"""Prompt templates with named placeholders, and a history of generated prompts."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Mapping

_MAX_RECENT_PROMPTS = 50

_GENERAL_SUGGESTIONS = (
    "Explain this code",
    "Find potential bugs",
    "Suggest improvements",
    "Add documentation",
)


class PromptCategory(Enum):
    CODE_GENERATION = auto()
    BUG_FIX = auto()
    REFACTORING = auto()
    DOCUMENTATION = auto()
    TESTING = auto()
    OPTIMIZATION = auto()
    SECURITY = auto()
    CUSTOM = auto()


@dataclass
class PromptTemplate:
    """A prompt with ``{name}`` placeholders for each of its variables."""

    name: str
    description: str
    template: str
    variables: list[str] = field(default_factory=list)
    category: PromptCategory = PromptCategory.CUSTOM


class PromptError(Exception):
    """Raised when a prompt cannot be generated."""


_DEFAULT_TEMPLATES = (
    PromptTemplate(
        "generate_function",
        "Generate a function with given specifications",
        "Generate a {language} function that {description}. The function should {requirements}.",
        ["language", "description", "requirements"],
        PromptCategory.CODE_GENERATION,
    ),
    PromptTemplate(
        "fix_bug",
        "Fix a bug in the code",
        "Fix the following bug in this {language} code:\n{code}\nError: {error}\n"
        "Provide the corrected code and explain the fix.",
        ["language", "code", "error"],
        PromptCategory.BUG_FIX,
    ),
    PromptTemplate(
        "refactor_code",
        "Refactor code for better quality",
        "Refactor this {language} code to improve {aspect}:\n{code}\nMaintain the same functionality.",
        ["language", "aspect", "code"],
        PromptCategory.REFACTORING,
    ),
    PromptTemplate(
        "add_documentation",
        "Add documentation to code",
        "Add comprehensive documentation to this {language} code:\n{code}\nInclude {doc_type} documentation.",
        ["language", "code", "doc_type"],
        PromptCategory.DOCUMENTATION,
    ),
    PromptTemplate(
        "write_tests",
        "Write tests for code",
        "Write {test_type} tests for this {language} code:\n{code}\nCover edge cases and common scenarios.",
        ["test_type", "language", "code"],
        PromptCategory.TESTING,
    ),
    PromptTemplate(
        "optimize_performance",
        "Optimize code for performance",
        "Optimize this {language} code for {optimization_goal}:\n{code}\nProvide benchmarks if possible.",
        ["language", "optimization_goal", "code"],
        PromptCategory.OPTIMIZATION,
    ),
    PromptTemplate(
        "security_review",
        "Review code for security issues",
        "Review this {language} code for security vulnerabilities:\n{code}\nSuggest fixes for any issues found.",
        ["language", "code"],
        PromptCategory.SECURITY,
    ),
)


class AutoPromptEngine:
    """Holds built-in and custom templates and fills them in."""

    def __init__(self) -> None:
        self._templates: dict[str, PromptTemplate] = {
            t.name: PromptTemplate(t.name, t.description, t.template, list(t.variables), t.category)
            for t in _DEFAULT_TEMPLATES
        }
        self._custom_templates: dict[str, PromptTemplate] = {}
        self._recent: deque[str] = deque(maxlen=_MAX_RECENT_PROMPTS)

    def get_template(self, name: str) -> PromptTemplate | None:
        """Look up a template; built-in templates win over custom ones."""
        return self._templates.get(name) or self._custom_templates.get(name)

    def list_templates(self, category: PromptCategory | None = None) -> list[PromptTemplate]:
        """All templates, optionally only those of ``category``."""
        templates = [*self._templates.values(), *self._custom_templates.values()]
        if category is not None:
            templates = [t for t in templates if t.category == category]
        return templates

    def generate_prompt(self, template_name: str, variables: Mapping[str, str]) -> str:
        """Fill in a template; raises PromptError if it or a variable is missing."""
        template = self.get_template(template_name)
        if template is None:
            raise PromptError(f"Template '{template_name}' not found")
        prompt = template.template
        for var in template.variables:
            if var not in variables:
                raise PromptError(f"Missing variable: {var}")
            prompt = prompt.replace(f"{{{var}}}", variables[var])
        self._recent.append(prompt)
        return prompt

    def add_custom_template(self, template: PromptTemplate) -> None:
        self._custom_templates[template.name] = template

    @property
    def recent_prompts(self) -> list[str]:
        """The last generated prompts, oldest first."""
        return list(self._recent)

    def suggest_prompt(self, context: str) -> list[str]:
        """Prompt ideas for ``context``; the same general set is offered for any context."""
        return [suggestion for suggestion in _GENERAL_SUGGESTIONS]