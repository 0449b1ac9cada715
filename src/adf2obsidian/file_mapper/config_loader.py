"""YAML configuration loading and validation.

This module loads export configuration from a YAML file and applies
environment overrides (a .env file is honoured via python-dotenv).
"""

import os
import string
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from adf2obsidian.adf_converter.adf_models import MAX_SAFE_DEPTH

from .errors import ConfigError, FilesystemError
from .models import ExportConfig


class ConfigLoader:
    """Handles configuration file loading and validation.

    Configuration file structure (every field optional):
        include_unsupported_comments: true
        media_url_template: "https://example.atlassian.net/wiki/download/{id}"
        mentions:
          "557058:abc": "Jane Doe"
        max_depth: 100            # 1 to MAX_SAFE_DEPTH
        index_filename: index.md
        frontmatter: false

    Environment overrides:
        ADF2OBSIDIAN_INCLUDE_COMMENTS: "true" / "false"
        ADF2OBSIDIAN_MEDIA_URL_TEMPLATE: URL template
    """

    # Default config file looked up in the working directory
    DEFAULT_CONFIG_FILE = '.adf2obsidian.yaml'

    KNOWN_FIELDS = {
        'include_unsupported_comments',
        'media_url_template',
        'mentions',
        'max_depth',
        'index_filename',
        'frontmatter',
    }

    # Placeholders accepted in media_url_template
    TEMPLATE_FIELDS = {'id', 'collection'}

    ENV_INCLUDE_COMMENTS = 'ADF2OBSIDIAN_INCLUDE_COMMENTS'
    ENV_MEDIA_URL_TEMPLATE = 'ADF2OBSIDIAN_MEDIA_URL_TEMPLATE'

    @classmethod
    def load(cls, config_path: str) -> ExportConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ExportConfig object with parsed configuration

        Raises:
            FilesystemError: If file cannot be read
            ConfigError: If configuration is invalid or malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise FilesystemError(
                config_path,
                'read',
                'Configuration file not found'
            )
        except PermissionError:
            raise FilesystemError(
                config_path,
                'read',
                'Permission denied'
            )
        except OSError as e:
            raise FilesystemError(
                config_path,
                'read',
                str(e)
            )

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML syntax: {str(e)}"
            )

        # An empty file means all defaults
        if config_dict is None:
            return ExportConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls.parse_config(config_dict)

    @classmethod
    def load_or_default(cls, config_path: Optional[str] = None) -> ExportConfig:
        """Load config_path, or the default config file if present, else defaults.

        Environment overrides are applied in every case.
        """
        if config_path is None and os.path.exists(cls.DEFAULT_CONFIG_FILE):
            config_path = cls.DEFAULT_CONFIG_FILE

        config = cls.load(config_path) if config_path else ExportConfig()
        return cls.apply_env(config)

    @classmethod
    def parse_config(cls, config_dict: Dict[str, Any]) -> ExportConfig:
        """Parse and validate configuration dictionary.

        Args:
            config_dict: Raw configuration dictionary from YAML

        Returns:
            Validated ExportConfig object

        Raises:
            ConfigError: If configuration is invalid
        """
        unknown_fields = set(config_dict.keys()) - cls.KNOWN_FIELDS
        if unknown_fields:
            raise ConfigError(
                f"Unknown fields: {', '.join(sorted(str(f) for f in unknown_fields))}"
            )

        defaults = ExportConfig()

        include_comments = config_dict.get('include_unsupported_comments', defaults.include_unsupported_comments)
        if not isinstance(include_comments, bool):
            raise ConfigError(
                f"Must be a boolean, got {type(include_comments).__name__}",
                'include_unsupported_comments'
            )

        frontmatter = config_dict.get('frontmatter', defaults.frontmatter)
        if not isinstance(frontmatter, bool):
            raise ConfigError(
                f"Must be a boolean, got {type(frontmatter).__name__}",
                'frontmatter'
            )

        media_url_template = config_dict.get('media_url_template')
        if media_url_template is not None:
            media_url_template = cls._validate_template(media_url_template)

        mentions_raw = config_dict.get('mentions') or {}
        if not isinstance(mentions_raw, dict):
            raise ConfigError(
                "Field must be a mapping of mention id to display name",
                'mentions'
            )
        mentions = {str(key): str(value) for key, value in mentions_raw.items()}

        max_depth = config_dict.get('max_depth', defaults.max_depth)
        if isinstance(max_depth, bool) or not isinstance(max_depth, int):
            raise ConfigError(
                f"Must be an integer, got {type(max_depth).__name__}",
                'max_depth'
            )
        if max_depth < 1:
            raise ConfigError(
                f"Must be at least 1, got {max_depth}",
                'max_depth'
            )
        if max_depth > MAX_SAFE_DEPTH:
            raise ConfigError(
                f"Must be at most {MAX_SAFE_DEPTH}, got {max_depth}",
                'max_depth'
            )

        index_filename = config_dict.get('index_filename', defaults.index_filename)
        if not isinstance(index_filename, str) or not index_filename.strip():
            raise ConfigError(
                "Must be a non-empty string",
                'index_filename'
            )
        if '/' in index_filename or '\\' in index_filename:
            raise ConfigError(
                f"Must be a plain file name, got '{index_filename}'",
                'index_filename'
            )

        return ExportConfig(
            include_unsupported_comments=include_comments,
            media_url_template=media_url_template,
            mentions=mentions,
            max_depth=max_depth,
            index_filename=index_filename.strip(),
            frontmatter=frontmatter,
        )

    @classmethod
    def apply_env(cls, config: ExportConfig) -> ExportConfig:
        """Apply environment overrides (after loading any .env file).

        Args:
            config: Configuration to override

        Returns:
            The same ExportConfig, updated in place

        Raises:
            ConfigError: If an environment value is invalid
        """
        load_dotenv()

        include_comments = os.environ.get(cls.ENV_INCLUDE_COMMENTS)
        if include_comments is not None:
            value = include_comments.strip().lower()
            if value in ('1', 'true', 'yes', 'on'):
                config.include_unsupported_comments = True
            elif value in ('0', 'false', 'no', 'off'):
                config.include_unsupported_comments = False
            else:
                raise ConfigError(
                    f"Expected true/false, got '{include_comments}'",
                    cls.ENV_INCLUDE_COMMENTS
                )

        media_url_template = os.environ.get(cls.ENV_MEDIA_URL_TEMPLATE)
        if media_url_template:
            config.media_url_template = cls._validate_template(
                media_url_template, cls.ENV_MEDIA_URL_TEMPLATE
            )

        return config

    @classmethod
    def _validate_template(cls, template: Any, config_field: str = 'media_url_template') -> str:
        if not isinstance(template, str) or not template.strip():
            raise ConfigError("Must be a non-empty string", config_field)

        try:
            placeholders = {
                name for _, name, _, _ in string.Formatter().parse(template)
                if name is not None
            }
        except ValueError as e:
            raise ConfigError(f"Invalid template: {e}", config_field)

        unknown = placeholders - cls.TEMPLATE_FIELDS
        if unknown:
            raise ConfigError(
                f"Unknown placeholder(s): {', '.join(sorted(unknown))} "
                f"(allowed: {', '.join(sorted(cls.TEMPLATE_FIELDS))})",
                config_field
            )
        return template
