SCHEMA = {
    'FOO': 'duration',
}
