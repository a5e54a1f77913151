SCHEMA = {
    'FOO': 'boolean',
}
