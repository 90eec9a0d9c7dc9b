"""Start-up and shutdown of the real application, with repositories mocked."""
from unittest.mock import AsyncMock, MagicMock, patch

import structlog
from fastapi.testclient import TestClient

from src.api.dependencies import get_item_repo
from src.api.main import app


def test_lifespan_configures_logging_and_disposes_engine() -> None:
    item_repo = MagicMock()
    item_repo.list_by_type = AsyncMock(return_value=[])
    app.dependency_overrides[get_item_repo] = lambda: item_repo

    try:
        with patch("src.api.main.dispose_engine", new_callable=AsyncMock) as dispose:
            with TestClient(app) as client:
                assert structlog.is_configured()
                response = client.get("/api/Sellers/GetByCategory/1")
                assert response.status_code == 404
                dispose.assert_not_awaited()

            dispose.assert_awaited_once()
    finally:
        app.dependency_overrides.clear()
        structlog.reset_defaults()
