SCHEMA = {
    'FOO': 'integer',
}
