import importlib.util
import json
import os
from pathlib import Path

import yaml

from ..common import compat_typing as t
from ..logger import get_logger
from .errors import SchemaLoadError

logger = get_logger('loader')

SCHEMA_BASE_NAME = 'config'
SCHEMA_SUFFIXES = ('.py', '.yml', '.yaml', '.json')
# module attributes holding the schema in a python schema file
SCHEMA_ATTRS = ('SCHEMA', 'schema')


def _candidates(path: Path) -> t.List[Path]:
    if path.is_file():
        return [path]
    if path.is_dir():
        return [path / f'{SCHEMA_BASE_NAME}{suffix}' for suffix in SCHEMA_SUFFIXES]
    return [path.with_name(path.name + suffix) for suffix in SCHEMA_SUFFIXES]


def find_schema_file(path: t.Union[str, Path]) -> Path:
    """Find the schema file from a file path, a directory, or a path without suffix

    Raises:
        SchemaLoadError: no schema file found
    """
    path = Path(path).expanduser().resolve()
    candidates = _candidates(path)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    _msg = 'Can not find schema file from:\n  ' + '\n  '.join(str(c) for c in candidates)
    logger.warning(_msg)
    raise SchemaLoadError(
        f'Expecting a {SCHEMA_BASE_NAME}.py/.yml/.json file in the current working directory '
        'or an explicit location via ENVSCHEMA_CONFIG_PATH'
    )


def _load_python(schema_file: Path) -> t.Any:
    module_name = f'_envschema_schema_{abs(hash(str(schema_file)))}'
    spec = importlib.util.spec_from_file_location(module_name, str(schema_file))
    if spec is None or spec.loader is None:
        raise SchemaLoadError(f'Can not import {schema_file}')
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    for attr in SCHEMA_ATTRS:
        if hasattr(module, attr):
            return getattr(module, attr)
    raise SchemaLoadError(f'{schema_file} does not define {" or ".join(SCHEMA_ATTRS)}')


def load_schema_file(schema_file: t.Union[str, Path]) -> t.Dict[str, t.Any]:
    """Load schema from a python, yaml or json file

    YAML files are read as YAML 1.1: unquoted yes/no/on/off become booleans, so quote
    such keys and enum values (`"NO": string`, `["yes", "no"]`).

    Args:
        schema_file (Union[str, Path]): schema file path

    Raises:
        SchemaLoadError: failed to read or parse the file, or it does not hold a mapping

    Returns:
        Dict[str, Any]: key to type declaration
    """
    schema_file = Path(schema_file)
    try:
        if schema_file.suffix == '.py':
            raw_data = _load_python(schema_file)
        else:
            with open(schema_file, 'r', encoding='utf-8') as f:
                if schema_file.suffix == '.json':
                    raw_data = json.load(f)
                else:
                    raw_data = yaml.load(f.read(), Loader=yaml.FullLoader)
    except SchemaLoadError:
        raise
    except Exception as e:
        raise SchemaLoadError(f'Failed to load {schema_file}: {e}') from e
    if not isinstance(raw_data, t.Mapping):
        raise SchemaLoadError(f'{schema_file} must define a mapping, got {type(raw_data).__name__}')
    logger.info(f'Loaded config schema from {schema_file}')
    return dict(raw_data)


def load_schema(path: t.Union[str, Path, None] = None) -> t.Dict[str, t.Any]:
    """Find and load the schema. Defaults to ``./config`` in the current working directory."""
    if path is None:
        path = os.path.join(os.getcwd(), SCHEMA_BASE_NAME)
    return load_schema_file(find_schema_file(path))
