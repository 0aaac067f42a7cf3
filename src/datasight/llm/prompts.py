"""Prompt templates for the insight features.

Templates live in ``config/prompts/<name>.yaml``. Placeholders use
``str.format`` syntax (``{data_summary}``); literal JSON braces in the
expected-response examples are doubled (``{{ }}``).
"""

from pathlib import Path
from string import Formatter
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from datasight.core.config import get_settings


class PromptInput(BaseModel):
    """A variable a template expects."""

    description: str = ""
    required: bool = False
    default: str | None = None


class PromptTemplate(BaseModel):
    """A prompt template from YAML."""

    name: str
    version: str
    description: str
    temperature: float = 0.0
    system_prompt: str | None = None
    user_prompt: str
    inputs: dict[str, PromptInput] = Field(default_factory=dict)

    @property
    def placeholders(self) -> set[str]:
        """Variable names referenced by the system and user prompts."""
        names: set[str] = set()
        for text in (self.system_prompt, self.user_prompt):
            if text:
                names.update(field for _, field, _, _ in Formatter().parse(text) if field)
        return names

    @model_validator(mode="after")
    def _placeholders_are_declared(self) -> "PromptTemplate":
        undeclared = self.placeholders - set(self.inputs)
        if undeclared:
            raise ValueError(
                f"Template '{self.name}' uses undeclared inputs: {sorted(undeclared)}"
            )
        return self


class RenderedPrompt(BaseModel):
    """A template filled with context, ready for the provider."""

    system: str | None
    user: str
    temperature: float


class PromptRenderer:
    """Load prompt templates from a directory and render them.

    Templates are parsed once and kept in memory.
    """

    def __init__(self, prompts_dir: Path | None = None):
        """Initialize prompt renderer.

        Args:
            prompts_dir: Directory containing prompt YAML files; defaults to
                prompts/ in the configured config directory
        """
        self.prompts_dir = prompts_dir or get_settings().config_path / "prompts"
        self._templates: dict[str, PromptTemplate] = {}

    def available(self) -> list[str]:
        """Names of the templates in the prompts directory."""
        if not self.prompts_dir.is_dir():
            return []
        return sorted(path.stem for path in self.prompts_dir.glob("*.yaml"))

    def load_template(self, name: str) -> PromptTemplate:
        """Load a template by name (file name without .yaml).

        Raises:
            FileNotFoundError: If the template file doesn't exist
            pydantic.ValidationError: If the file doesn't match the schema or
                uses placeholders it doesn't declare
        """
        template = self._templates.get(name)
        if template is not None:
            return template

        path = self.prompts_dir / f"{name}.yaml"
        if not path.is_file():
            raise FileNotFoundError(
                f"Prompt template not found: {path}. Available templates: {self.available()}"
            )

        template = PromptTemplate.model_validate(yaml.safe_load(path.read_text()))
        self._templates[name] = template
        return template

    def render(self, name: str, context: dict[str, Any]) -> RenderedPrompt:
        """Render a template.

        Args:
            name: Template name
            context: Values for the template inputs; optional inputs fall
                back to their defaults

        Returns:
            RenderedPrompt

        Raises:
            ValueError: If a required input is missing
        """
        template = self.load_template(name)

        values: dict[str, Any] = {}
        for input_name, declared in template.inputs.items():
            if input_name in context:
                values[input_name] = context[input_name]
            elif declared.required:
                raise ValueError(f"Missing required input '{input_name}' for template '{name}'")
            else:
                values[input_name] = declared.default or ""

        return RenderedPrompt(
            system=template.system_prompt.format(**values) if template.system_prompt else None,
            user=template.user_prompt.format(**values),
            temperature=template.temperature,
        )

    def clear_cache(self) -> None:
        self._templates.clear()
