"""Configuration loader with strict validation."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from smappet.casing import CasingRegistry, DEFAULT_CASING_ORDER
from smappet.exceptions import ValidationError, ConfigValidationError
from smappet.template.renderer import UnknownMarkerPolicy


logger = logging.getLogger(__name__)


CONFIG_FILENAMES = ('.smappet.yaml', '.smappet.yml')
NAMES_PLACEHOLDER = '{names}'


@dataclass
class PromptConfig:
    """Text shown when asking for a comma separated list."""
    prompt: str
    placeholder: str


@dataclass
class SmappetConfig:
    """
    Effective configuration.

    Attributes:
        casings: Casing names in tagging scan order
        unknown_markers: Rendering of markers with an unregistered casing name
        strict_markers: Reject templates whose tags do not pair up when scanning
            for variable names; applying a template always requires paired tags
        separator: Separator for prompted lists
        variables_prompt: Prompt for variable names (copy)
        values_prompt: Prompt for replacement values (paste); the placeholder
            may contain '{names}' for the variable names found
    """
    casings: List[str] = field(default_factory=lambda: list(DEFAULT_CASING_ORDER))
    unknown_markers: UnknownMarkerPolicy = UnknownMarkerPolicy.EMPTY
    strict_markers: bool = False
    separator: str = ','
    variables_prompt: PromptConfig = field(default_factory=lambda: PromptConfig(
        prompt="Comma separated list of camelCase variable names to pick up",
        placeholder="variableNames, toPickUp",
    ))
    values_prompt: PromptConfig = field(default_factory=lambda: PromptConfig(
        prompt="Comma separated list of replacement values.",
        placeholder=f"New values for {NAMES_PLACEHOLDER}",
    ))

    def values_placeholder(self, names: List[str]) -> str:
        return self.values_prompt.placeholder.replace(NAMES_PLACEHOLDER, ", ".join(names))


class ConfigLoader:
    """Loads and validates smappet YAML configuration."""

    SUPPORTED_VERSIONS = {"1"}
    KNOWN_FIELDS = {'version', 'casings', 'unknown_markers', 'strict_markers', 'separator', 'prompts'}
    PROMPT_KEYS = {'variables', 'values'}

    def __init__(self, registry: Optional[CasingRegistry] = None):
        """Initialize loader with the registry casing names are checked against."""
        self.registry = registry or CasingRegistry()
        self.errors: List[ValidationError] = []

    def discover(self, workspace: Path) -> Optional[Path]:
        """Find a config file in the workspace, if any."""
        for filename in CONFIG_FILENAMES:
            candidate = workspace / filename
            if candidate.is_file():
                return candidate
        return None

    def load(self, config_path: Optional[Path] = None) -> SmappetConfig:
        """
        Load and validate configuration.

        Args:
            config_path: YAML file, or None for defaults

        Returns:
            Validated configuration

        Raises:
            ConfigValidationError: If the file cannot be read or is invalid
        """
        self.errors = []
        if config_path is None:
            return SmappetConfig()

        logger.info(f"Loading config: {config_path}")
        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load config: {e}")
            self._raise_validation_errors()

        if data is None:
            return SmappetConfig()
        if not isinstance(data, dict):
            self._add_error("Config must be a YAML object/dictionary")
            self._raise_validation_errors()

        config = self.parse(data)
        if self.errors:
            self._raise_validation_errors()
        return config

    def parse(self, data: Dict[str, Any]) -> SmappetConfig:
        """Build a config from a mapping, collecting errors in self.errors."""
        config = SmappetConfig()

        for key in data.keys():
            if key not in self.KNOWN_FIELDS:
                self._add_error(f"Unknown field '{key}'", path=str(key))

        version = data.get('version')
        if version is not None and str(version) not in self.SUPPORTED_VERSIONS:
            self._add_error(f"Unsupported version '{version}'. Supported: {sorted(self.SUPPORTED_VERSIONS)}", path='version')

        if 'casings' in data:
            config.casings = self._validate_casings(data['casings'])

        if 'unknown_markers' in data:
            try:
                config.unknown_markers = UnknownMarkerPolicy(data['unknown_markers'])
            except ValueError:
                allowed = [policy.value for policy in UnknownMarkerPolicy]
                self._add_error(f"'unknown_markers' must be one of {allowed}", path='unknown_markers')

        if 'strict_markers' in data:
            if isinstance(data['strict_markers'], bool):
                config.strict_markers = data['strict_markers']
            else:
                self._add_error("'strict_markers' must be a boolean", path='strict_markers')

        if 'separator' in data:
            separator = data['separator']
            if isinstance(separator, str) and separator:
                config.separator = separator
            else:
                self._add_error("'separator' must be a non-empty string", path='separator')

        if 'prompts' in data:
            self._apply_prompts(data['prompts'], config)

        return config

    def _validate_casings(self, casings: Any) -> List[str]:
        if not isinstance(casings, list) or not casings:
            self._add_error("'casings' must be a non-empty list of casing names", path='casings')
            return list(DEFAULT_CASING_ORDER)

        valid = []
        for index, name in enumerate(casings):
            if not isinstance(name, str) or not self.registry.exists(name):
                self._add_error(
                    f"Unknown casing '{name}'. Available: {self.registry.list_casings()}",
                    path=f"casings[{index}]",
                )
            elif name in valid:
                self._add_error(f"Duplicate casing '{name}'", path=f"casings[{index}]")
            else:
                valid.append(name)
        return valid

    def _apply_prompts(self, prompts: Any, config: SmappetConfig) -> None:
        if not isinstance(prompts, dict):
            self._add_error("'prompts' must be a dictionary", path='prompts')
            return

        for key, value in prompts.items():
            if key not in self.PROMPT_KEYS:
                self._add_error(f"Unknown prompt '{key}'", path=f"prompts.{key}")
                continue
            if not isinstance(value, dict):
                self._add_error("Prompt must be a dictionary with 'prompt' and/or 'placeholder'", path=f"prompts.{key}")
                continue

            target = config.variables_prompt if key == 'variables' else config.values_prompt
            for field_name, text in value.items():
                if field_name not in ('prompt', 'placeholder'):
                    self._add_error(f"Unknown field '{field_name}'", path=f"prompts.{key}.{field_name}")
                elif not isinstance(text, str):
                    self._add_error("Must be a string", path=f"prompts.{key}.{field_name}")
                else:
                    setattr(target, field_name, text)

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message=message, path=path))

    def _raise_validation_errors(self):
        raise ConfigValidationError(self.errors)
