from typing import Optional

import pytest
from fastapi import FastAPI
from fastapi import Depends
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from pagerql import Connection, ConnectionSettings, Cursor
from pagerql import exc
from pagerql.integration.fastapi import paging_arguments, connection_dependency


EMPTY_PAGING_ARGUMENTS = dict(
    first=None,
    after=None,
    last=None,
    before=None,
    order=None,
)


def paging(**fields):
    return {
        **EMPTY_PAGING_ARGUMENTS,
        **fields
    }


@pytest.mark.parametrize(('uri_params', 'expected_result'), [
    ('', paging()),
    ('?first=10', paging(first=10)),
    ('?first=10&after=abc', paging(first=10, after='abc')),
    ('?last=5&before=abc&order=-id', paging(last=5, before='abc', order='-id')),
    ('?order=%2BcreatedAt', paging(order='+createdAt')),
])
def test_paging_arguments(app: FastAPI, client: TestClient, uri_params: str, expected_result: Optional[dict]):
    """ FastAPI: get paging arguments from URL parameters """
    @app.get('/api')
    def api(args=Depends(paging_arguments)):
        return {'args': args}

    res = client.request('GET', f'/api{uri_params}')
    assert res.json() == {'args': expected_result}


def test_connection_dependency(app: FastAPI, client: TestClient):
    """ FastAPI: get a Connection """
    users = [{'id': n} for n in range(1, 4)]

    @app.get('/api/users')
    def list_users(connection: Connection = Depends(connection_dependency(default_order='id', settings=ConnectionSettings(primary_key='id')))):
        spec = connection.get_query_spec()
        if 'where' in spec:
            rows = [row for row in users if row['id'] > spec['where']['id']['gt']][:spec['limit']]
        else:
            rows = users[spec['offset']:spec['offset'] + spec['limit']]
        return connection.set_nodes(rows).set_total_count(len(users)).to_response()

    # Page 1
    res = client.get('/api/users', params={'first': 2})
    assert res.status_code == 200
    page = res.json()
    assert page['nodes'] == [{'id': 1}, {'id': 2}]
    assert page['totalCount'] == 3
    assert page['pageInfo']['hasNextPage'] is True
    assert Cursor.decode(page['pageInfo']['endCursor']) == Cursor(field='id', offset=2, primary_key='id', primary_value=2)

    # Page 2
    res = client.get('/api/users', params={'first': 2, 'after': page['pageInfo']['endCursor']})
    page = res.json()
    assert page['nodes'] == [{'id': 3}]
    assert page['pageInfo']['hasNextPage'] is False
    assert page['pageInfo']['hasPreviousPage'] is True

    # Errors
    res = client.get('/api/users')
    assert res.status_code == 400
    assert 'first' in res.json()['error']

    res = client.get('/api/users', params={'first': 2, 'order': '-id'})
    assert res.status_code == 400
    assert 'ASC' in res.json()['error']

    res = client.get('/api/users', params={'first': 2, 'after': 'garbage!'})
    assert res.status_code == 400
    assert 'Invalid cursor' in res.json()['error']


@pytest.fixture()
def app() -> FastAPI:
    app = FastAPI()

    # Handlers must be known before the client starts the app
    @app.exception_handler(exc.BasePagerqlException)
    async def paging_error(request, e: exc.BasePagerqlException):
        return JSONResponse({'error': str(e)}, status_code=400)

    return app


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    with TestClient(app) as c:
        yield c
