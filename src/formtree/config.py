"""
Configuration module for formtree.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from formtree.constants import DEPENDENCY_MESSAGE, REQUIRED_MESSAGE

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass
class FormTreeConfig:
    """Configuration settings for formtree."""

    # Value assignment
    strict_values: bool = False  # Reject unknown keys on object fields

    # Messages
    required_message: str = REQUIRED_MESSAGE
    dependency_message: str = DEPENDENCY_MESSAGE

    # Logging
    log_level: str = "WARNING"

    # Output settings
    indent_json_output: int = 2
    default_form_name: str = "form"

    @classmethod
    def from_env(cls) -> "FormTreeConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            strict_values=_env_flag("FORMTREE_STRICT_VALUES", _defaults.strict_values),
            required_message=os.getenv("FORMTREE_REQUIRED_MESSAGE", _defaults.required_message),
            dependency_message=os.getenv("FORMTREE_DEPENDENCY_MESSAGE", _defaults.dependency_message),
            log_level=os.getenv("FORMTREE_LOG_LEVEL", _defaults.log_level).upper(),
            indent_json_output=int(os.getenv("FORMTREE_INDENT_JSON", str(_defaults.indent_json_output))),
            default_form_name=os.getenv("FORMTREE_FORM_NAME", _defaults.default_form_name),
        )


config = FormTreeConfig.from_env()


def get_config() -> FormTreeConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormTreeConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
