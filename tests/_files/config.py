SCHEMA = {
    'FOO': 'string',
}
