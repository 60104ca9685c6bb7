import json
import textwrap
import pytest
from scripts import generate_spec

REGISTRY_MODULE = textwrap.dedent('''
    from apidocs.openapi import RouteRegistry, ParamSchema

    registry = RouteRegistry()
    registry.register('GET', '/items', 'List items', response=[{'type': 'string'}])
    registry.register('POST', '/items', 'Create item', {'name': 'string'}, response={'id': 'string'})

    def build_registry():
        reg = RouteRegistry()
        reg.register('GET', '/items/{id}', 'Get item', path_vars=[ParamSchema('id', required=True)])
        return reg

    not_a_registry = 42
''')


@pytest.fixture()
def target(tmp_path, monkeypatch):
    (tmp_path / 'sample_docs.py').write_text(REGISTRY_MODULE)
    monkeypatch.syspath_prepend(str(tmp_path))
    return 'sample_docs:registry'


def test_prints_hash_without_flags(target, capsys):
    assert generate_spec.main(['--registry', target]) == 0
    out = capsys.readouterr().out.strip()
    _, expected = generate_spec.compute_spec_and_hash(generate_spec.load_registry(target))
    assert out == expected
    assert len(out) == 64


def test_writes_spec_json(target, tmp_path):
    out = tmp_path / 'build' / 'openapi.json'
    assert generate_spec.main(['--registry', target, '--out', str(out), '--title', 'Items']) == 0
    spec = json.loads(out.read_text())
    assert spec['info'] == {'title': 'Items', 'version': '1.0.0'}
    assert spec['paths']['/items']['GET']['responses']['200']['content']['application/json']['schema'] == {
        'type': 'array', 'items': {'type': 'string'},
    }


def test_callable_target(tmp_path, monkeypatch):
    (tmp_path / 'sample_docs.py').write_text(REGISTRY_MODULE)
    monkeypatch.syspath_prepend(str(tmp_path))
    reg = generate_spec.load_registry('sample_docs:build_registry')
    assert [r.path for r in reg.list()] == ['/items/{id}']


def test_update_then_check_hash(target, tmp_path, capsys):
    snapshot = tmp_path / 'hash.txt'
    assert generate_spec.main(['--registry', target, '--snapshot', str(snapshot), '--update-hash']) == 0
    assert len(snapshot.read_text().strip()) == 64
    assert generate_spec.main(['--registry', target, '--snapshot', str(snapshot), '--check']) == 0
    snapshot.write_text('deadbeef\n')
    assert generate_spec.main(['--registry', target, '--snapshot', str(snapshot), '--check']) == 2
    assert 'mismatch' in capsys.readouterr().err


def test_bad_target_exit_code(target, capsys):
    assert generate_spec.main(['--registry', 'sample_docs:not_a_registry']) == 3
    assert generate_spec.main(['--registry', 'sample_docs:missing']) == 3
    assert generate_spec.main(['--registry', 'no_colon']) == 3
    assert 'Failed to build spec' in capsys.readouterr().err


def test_check_requires_snapshot(target):
    with pytest.raises(SystemExit):
        generate_spec.main(['--registry', target, '--check'])


def test_nested_array_of_exports(tmp_path, monkeypatch):
    (tmp_path / 'nested_docs.py').write_text(textwrap.dedent('''
        from apidocs.openapi import RouteRegistry, ArrayOf

        registry = RouteRegistry()
        registry.register('POST', '/carts', 'Create cart',
                          response={'type': 'object', 'properties': {'tags': ArrayOf({'type': 'string'})}})
    '''))
    monkeypatch.syspath_prepend(str(tmp_path))
    out = tmp_path / 'openapi.json'
    assert generate_spec.main(['--registry', 'nested_docs:registry', '--out', str(out)]) == 0
    schema = json.loads(out.read_text())['paths']['/carts']['POST']['responses']['200']['content']['application/json']['schema']
    assert schema['properties']['tags'] == {'type': 'array', 'items': {'type': 'string'}}
