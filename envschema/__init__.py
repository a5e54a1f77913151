# pylint: disable=unused-import
# flake8: noqa: F401
# ruff: noqa: F401

from .common.duration import Duration
from .config import (
    Config,
    ConfigError,
    DurationError,
    EnvSchemaSettings,
    SchemaLoadError,
    TypeDeclaration,
    build,
    get_config,
    load_schema,
)
from .logger import get_logger

__version__ = '0.1.0'
