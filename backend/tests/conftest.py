import os, sys, pytest
# Ensure backend directory is on path so 'apidocs' and 'scripts' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from apidocs import create_app
from apidocs.openapi import RouteRegistry


@pytest.fixture()
def registry():
    return RouteRegistry()


@pytest.fixture()
def app_instance(registry):
    app = create_app(registry=registry)
    yield app


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()
