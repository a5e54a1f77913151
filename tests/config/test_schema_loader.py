from pathlib import Path

import pytest

from envschema.config.errors import SchemaLoadError
from envschema.config.loader import find_schema_file, load_schema, load_schema_file

TEST_FILE_PATH = (Path(__file__).parent.parent / '_files').resolve()


def test_find_schema_file() -> None:
    # a directory holding config.py
    assert find_schema_file(TEST_FILE_PATH / 'boolean') == TEST_FILE_PATH / 'boolean' / 'config.py'
    # a path without suffix
    schema_file = find_schema_file(TEST_FILE_PATH / 'yaml_example' / 'config')
    assert schema_file == TEST_FILE_PATH / 'yaml_example' / 'config.yml'
    # a file
    json_file = TEST_FILE_PATH / 'json_example' / 'config.json'
    assert find_schema_file(json_file) == json_file
    with pytest.raises(SchemaLoadError) as e:
        find_schema_file(TEST_FILE_PATH / 'empty_dir')
    assert str(e.value).startswith("CONFIG: Can't access config definition:")


def test_load_python_schema() -> None:
    schema = load_schema(TEST_FILE_PATH / 'example')
    assert schema == {
        'STR': 'string',
        'BOOL': 'boolean',
        'INT': 'integer',
        'NUM': 'number',
        'ENM': ['a', 'b', 'c'],
    }
    # lowercase module attribute and callables
    schema = load_schema(TEST_FILE_PATH / 'validator')
    assert callable(schema['PORT']['validator'])


def test_load_yaml_and_json_schema() -> None:
    schema = load_schema(TEST_FILE_PATH / 'yaml_example')
    assert schema['ENM'] == ['a', 'b', 'c']
    assert schema['TIMEOUT'] == {'type': 'duration', 'env': 'REQUEST_TIMEOUT'}
    schema = load_schema(TEST_FILE_PATH / 'json_example')
    assert schema == {'STR': 'string', 'ENM': {'type': 'enum', 'values': ['a', 'b', 'c']}}


def test_yaml_schema_booleans(tmp_path: Path) -> None:
    schema_file = tmp_path / 'config.yml'
    schema_file.write_text('NO: string\nANSWER: [yes, no]\n', encoding='utf-8')
    assert load_schema_file(schema_file) == {False: 'string', 'ANSWER': [True, False]}
    schema_file.write_text('"NO": string\nANSWER: ["yes", "no"]\n', encoding='utf-8')
    assert load_schema_file(schema_file) == {'NO': 'string', 'ANSWER': ['yes', 'no']}


def test_load_invalid_schema(tmp_path: Path) -> None:
    with pytest.raises(SchemaLoadError):
        load_schema(TEST_FILE_PATH / 'not_mapping')
    bad_yaml = tmp_path / 'config.yml'
    bad_yaml.write_text('FOO: [string\n', encoding='utf-8')
    with pytest.raises(SchemaLoadError) as e:
        load_schema_file(bad_yaml)
    assert e.value.__cause__ is not None
    bad_py = tmp_path / 'no_schema.py'
    bad_py.write_text('OTHER = {}\n', encoding='utf-8')
    with pytest.raises(SchemaLoadError):
        load_schema_file(bad_py)
    broken_py = tmp_path / 'broken.py'
    broken_py.write_text('raise RuntimeError("boom")\n', encoding='utf-8')
    with pytest.raises(SchemaLoadError):
        load_schema_file(broken_py)


def test_load_schema_from_cwd(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(TEST_FILE_PATH)
    assert load_schema() == {'FOO': 'string'}
    monkeypatch.chdir(TEST_FILE_PATH / 'empty_dir')
    with pytest.raises(SchemaLoadError):
        load_schema()


if __name__ == '__main__':
    pytest.main([__file__, '--log-cli-level=DEBUG'])
