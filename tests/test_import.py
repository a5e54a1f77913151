import inspect
import sys


def test_import_from_package() -> None:
    if 'envschema' in sys.modules:
        del sys.modules['envschema']

    # exported methods / classes
    from envschema import (
        Config,
        ConfigError,
        Duration,
        DurationError,
        EnvSchemaSettings,
        SchemaLoadError,
        TypeDeclaration,
        build,
        get_config,
        get_logger,
        load_schema,
    )

    assert all(callable(fn) for fn in [build, get_config, get_logger, load_schema])
    assert all(
        inspect.isclass(cls)
        for cls in [Config, ConfigError, Duration, DurationError, EnvSchemaSettings, SchemaLoadError, TypeDeclaration]
    )
    assert issubclass(ConfigError, ValueError)
    assert get_logger().name == 'envschema'
    assert get_logger('config').name == 'envschema.config'
