from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
import pytest

from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    IntegrityViolationError,
    NotFoundError,
    UnavailableError,
)


class _Body(BaseModel):
    seat_id: int


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get('/not-found')
    async def not_found() -> None:
        raise NotFoundError('Booking 1 not found')

    @app.get('/conflict')
    async def conflict() -> None:
        raise ConflictError('Seat 11 is not available')

    @app.get('/integrity')
    async def integrity() -> None:
        raise IntegrityViolationError('fk violated')

    @app.get('/domain')
    async def domain() -> None:
        raise DomainError('Seat prices differ')

    @app.get('/unavailable')
    async def unavailable() -> None:
        raise UnavailableError('database unavailable')

    @app.get('/crash')
    async def crash() -> None:
        raise RuntimeError('unexpected')

    @app.post('/validate')
    async def validate(body: _Body) -> dict[str, int]:
        return {'seat_id': body.seat_id}

    return app


@pytest.mark.unit
class TestExceptionHandlers:
    @pytest.fixture
    def api(self) -> TestClient:
        return TestClient(_build_app(), raise_server_exceptions=False)

    @pytest.mark.parametrize(
        'path,status_code,error',
        [
            ('/not-found', 404, 'NotFoundError'),
            ('/conflict', 409, 'ConflictError'),
            ('/integrity', 409, 'IntegrityViolationError'),
            ('/domain', 400, 'DomainError'),
            ('/unavailable', 503, 'UnavailableError'),
        ],
    )
    def test_error_taxonomy_maps_to_status(
        self, api: TestClient, path: str, status_code: int, error: str
    ) -> None:
        response = api.get(path)

        assert response.status_code == status_code
        assert response.json()['error'] == error

    def test_unavailable_tells_caller_when_to_retry(self, api: TestClient) -> None:
        response = api.get('/unavailable')

        assert response.headers['Retry-After'] == '5'

    def test_unexpected_error_is_500_without_details(self, api: TestClient) -> None:
        response = api.get('/crash')

        assert response.status_code == 500
        assert response.json() == {'detail': 'Internal server error'}

    def test_invalid_body_is_400(self, api: TestClient) -> None:
        response = api.post('/validate', json={'seat_id': 'not-a-number'})

        assert response.status_code == 400
        assert response.json()['error'] == 'ValidationError'
