import pytest
import click
from cmdbundle.lib.mapping import (
    CommandMapping, MappingError, MAPPING, parse_mapping, parse_mappings, duplicate_names, find_mapping
)

@pytest.mark.parametrize('raw,expected', [
    ('build:/bin/true', CommandMapping('build', '/bin/true', None)),
    ('fail:/bin/false:desc', CommandMapping('fail', '/bin/false', 'desc')),
    ('ls:ls:List files: long form', CommandMapping('ls', 'ls', 'List files: long form')),
    ('x:y:', CommandMapping('x', 'y', '')),
    (':', CommandMapping('', '', None)),
])
def test_parse_mapping_fields(raw, expected):
    assert parse_mapping(raw) == expected

@pytest.mark.parametrize('raw', ['', 'build', '/bin/true', 'no colon here'])
def test_parse_mapping_without_colon_fails(raw):
    with pytest.raises(MappingError, match='at least name:path'):
        parse_mapping(raw)

def test_description_none_only_for_two_parts():
    assert parse_mapping('a:b').description is None
    assert parse_mapping('a:b:c').description == 'c'

def test_parse_mappings_keeps_order_and_duplicates():
    table = parse_mappings(['b:/x', 'a:/y', 'b:/z'])
    assert [m.name for m in table] == ['b', 'a', 'b']
    assert [m.path for m in table] == ['/x', '/y', '/z']

def test_mapping_is_immutable():
    m = parse_mapping('a:b')
    with pytest.raises(AttributeError):
        m.name = 'c'

def test_duplicate_names_and_first_match():
    table = parse_mappings(['x:/first', 'y:/other', 'x:/second', 'x:/third'])
    assert duplicate_names(table) == ['x']
    assert find_mapping(table, 'x').path == '/first'
    assert find_mapping(table, 'missing') is None

def test_param_type_converts_and_passes_through():
    m = MAPPING.convert('a:b:c', None, None)
    assert m == CommandMapping('a', 'b', 'c')
    assert MAPPING.convert(m, None, None) is m

def test_param_type_reports_bad_parameter():
    with pytest.raises(click.BadParameter) as exc:
        MAPPING.convert('nocolon', None, None)
    assert 'Mapping must be at least name:path' in exc.value.message
