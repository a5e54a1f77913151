from dataclasses import dataclass, replace

from ..common import compat_typing as t
from .errors import ConfigError

DEFAULT_PREFIX = 'APP'

PRIMITIVE_TYPES = ('string', 'boolean', 'integer', 'number', 'duration')
ENUM_TYPE = 'enum'

# A declaration as written in a schema: a type name, a list of enum values,
# or a mapping with type/env/values/validator.
RawDeclaration = t.Union[str, t.Sequence[str], t.Mapping[str, t.Any], 'TypeDeclaration']
Validator = t.Callable[[str], t.Any]


def env_key_for(key: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Default environment variable name of a schema key: ``{PREFIX}_{KEY}`` uppercased"""
    return f'{prefix}_{key}'.upper()


@dataclass(frozen=True)
class TypeDeclaration:
    """Parsing rules of one schema key.

    Args:
        type (str): one of the primitive types or 'enum'.
        env (str, optional): environment variable name, overrides the derived default.
        values (Sequence[str], optional): allowed values, required for 'enum'.
        validator (Callable[[str], Any], optional): predicate over the raw string value.
    """

    type: str
    env: t.Optional[str] = None
    values: t.Optional[t.Tuple[str, ...]] = None
    validator: t.Optional[Validator] = None


def normalize_declaration(key: str, declaration: RawDeclaration, prefix: str = DEFAULT_PREFIX) -> TypeDeclaration:
    """Turn any accepted declaration form into a TypeDeclaration with ``env`` resolved

    Args:
        key (str): logical key in the schema
        declaration (RawDeclaration): type name, enum values, mapping or TypeDeclaration
        prefix (str, optional): prefix of the derived env variable name. Defaults to 'APP'.

    Raises:
        ConfigError: the declaration is malformed

    Returns:
        TypeDeclaration: declaration with env always set
    """
    env_key = env_key_for(key, prefix)
    if isinstance(declaration, TypeDeclaration):
        values = declaration.values
        decl = replace(
            declaration, values=tuple(values) if isinstance(values, (list, tuple)) else values
        )
    elif isinstance(declaration, str):
        decl = TypeDeclaration(type=declaration)
    elif isinstance(declaration, t.Mapping):
        values = declaration.get('values')
        decl = TypeDeclaration(
            type=declaration.get('type'),  # type: ignore[arg-type]
            env=declaration.get('env') or None,
            values=tuple(values) if isinstance(values, (list, tuple)) else values,
            validator=declaration.get('validator'),
        )
    elif isinstance(declaration, (list, tuple)):
        decl = TypeDeclaration(type=ENUM_TYPE, values=tuple(declaration))
    else:
        raise ConfigError(env_key, f'Invalid declaration: {declaration!r}')

    env_key = decl.env or env_key
    if decl.type == ENUM_TYPE:
        if not isinstance(decl.values, tuple):
            raise ConfigError(env_key, 'Enumeration values are missing')
        if not all(isinstance(v, str) for v in decl.values):
            raise ConfigError(env_key, 'Enumeration values must be strings')
    if decl.validator is not None and not callable(decl.validator):
        raise ConfigError(env_key, 'Validator is not callable')
    return TypeDeclaration(type=decl.type, env=env_key, values=decl.values, validator=decl.validator)
