"""
config - Build configuration from environment variables.

This module provides:
- build: Parse environment variables according to a schema into a read-only Config.
- get_config: Load the schema file once and build the process configuration.
- load_schema: Find and load a schema from a python, yaml or json file.
"""

from .builder import Config, build  # noqa: F401
from .env_config import EnvSchemaSettings, get_config  # noqa: F401
from .errors import ConfigError, DurationError, SchemaLoadError  # noqa: F401
from .loader import load_schema  # noqa: F401
from .schema import TypeDeclaration  # noqa: F401
