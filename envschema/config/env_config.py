import os
from functools import lru_cache

from ..logger import get_logger
from .builder import Config, build
from .loader import load_schema
from .schema import DEFAULT_PREFIX

logger = get_logger('config')

DEFAULT_CONFIG_PATH = './config'


class EnvSchemaSettings:
    """Where the schema lives and which prefix env variable names use.

    Read once from the shell environment when the module is imported:
        - ENVSCHEMA_CONFIG_PATH: schema file, directory or path without suffix. Defaults to ./config
        - ENVSCHEMA_CONFIG_PREFIX: prefix of derived env variable names. Defaults to APP
    """

    CONFIG_PATH = os.getenv('ENVSCHEMA_CONFIG_PATH') or DEFAULT_CONFIG_PATH
    CONFIG_PREFIX = os.getenv('ENVSCHEMA_CONFIG_PREFIX') or DEFAULT_PREFIX

    @classmethod
    def _reload(cls) -> None:
        """Reload to accept new environment variables. Mainly used in unit tests."""
        cls.CONFIG_PATH = os.getenv('ENVSCHEMA_CONFIG_PATH') or DEFAULT_CONFIG_PATH
        cls.CONFIG_PREFIX = os.getenv('ENVSCHEMA_CONFIG_PREFIX') or DEFAULT_PREFIX
        get_config.cache_clear()

    @classmethod
    def schema_path(cls) -> str:
        # relative paths resolve against the current working directory
        return os.path.abspath(cls.CONFIG_PATH)


@lru_cache()
def get_config() -> Config:
    """Load the schema and build the process configuration once

    Example usage:

        ```python
        from envschema import get_config

        config = get_config()
        port = config.PORT
        ```

    Raises:
        SchemaLoadError: schema not found or invalid
        ConfigError: an environment variable is missing or invalid

    Returns:
        Config: read-only configuration, the same object on every call
    """
    schema = load_schema(EnvSchemaSettings.schema_path())
    logger.debug(f'Building config with prefix {EnvSchemaSettings.CONFIG_PREFIX}')
    return build(schema, os.environ, EnvSchemaSettings.CONFIG_PREFIX)
