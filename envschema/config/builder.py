import os

from ..common import compat_typing as t
from ..logger import get_logger
from .errors import ConfigError, ParseError
from .parsers import get_parser
from .schema import DEFAULT_PREFIX, RawDeclaration, normalize_declaration

logger = get_logger('config')


class Config(t.Mapping[str, t.Any]):
    """Read-only configuration values, keyed by schema key.

    Values can be read as items or attributes:

        ```python
        config['PORT'] == config.PORT
        ```

    Attribute access only reaches keys that are not attributes of the class, so keys
    like ``keys``, ``get``, ``items`` or ``values`` are only readable as items.

    Any attempt to set or delete a value raises an error.
    """

    def __init__(self, values: t.Optional[t.Mapping[str, t.Any]] = None) -> None:
        object.__setattr__(self, '_values', dict(values or {}))

    def __getitem__(self, key: str) -> t.Any:
        return self._values[key]

    def __iter__(self) -> t.Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> t.Any:
        # only called when normal lookup fails
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'") from None

    def __setattr__(self, name: str, value: t.Any) -> None:
        raise AttributeError(f'Config is read-only, can not set {name}')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'Config is read-only, can not delete {name}')

    def __reduce__(self) -> t.Tuple[t.Any, ...]:
        return (type(self), (self._values,))

    def __repr__(self) -> str:
        return f'Config({self._values!r})'


def build(
    schema: t.Mapping[str, RawDeclaration],
    environ: t.Optional[t.Mapping[str, str]] = None,
    prefix: str = DEFAULT_PREFIX,
) -> Config:
    """Build configuration from environment variables according to the schema

    Keys are processed in schema order, the first invalid key aborts the build.

    Args:
        schema (Mapping[str, RawDeclaration]): key to type declaration
        environ (Mapping[str, str], optional): environment variables. Defaults to os.environ.
        prefix (str, optional): prefix of derived env variable names. Defaults to 'APP'.

    Raises:
        ConfigError: a variable is missing, malformed, or fails validation

    Returns:
        Config: read-only configuration
    """
    if environ is None:
        environ = os.environ
    values: t.Dict[str, t.Any] = {}
    for key, declaration in schema.items():
        decl = normalize_declaration(key, declaration, prefix)
        env_key = t.cast(str, decl.env)
        raw = environ.get(env_key)
        if not raw:
            raise ConfigError(env_key)
        try:
            if decl.validator is not None and not decl.validator(raw):
                raise ParseError('Value did not pass validator function')
            values[key] = get_parser(decl.type)(raw, decl.values)
        except Exception as e:
            raise ConfigError(env_key, str(e)) from e
        logger.debug(f'Got env variable {env_key} for {key} ({decl.type})')
    logger.debug(f'Built config with {len(values)} keys')
    return Config(values)
