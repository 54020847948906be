from unittest.mock import MagicMock

import pytest
from rest_framework.exceptions import NotFound, ParseError

from modules.core.exception_handler import api_exception_handler

pytestmark = pytest.mark.unit


class TestApiExceptionHandler:
    def test_drf_exceptions_keep_their_status(self):
        response = api_exception_handler(ParseError("bad json"), {"view": None})
        assert response.status_code == 400
        assert response.data["detail"] == "bad json"

    def test_not_found_is_404(self):
        response = api_exception_handler(NotFound(), {"view": None})
        assert response.status_code == 404

    def test_unhandled_exception_is_500_with_message(self):
        response = api_exception_handler(
            RuntimeError("connection reset"), {"view": MagicMock()}
        )
        assert response.status_code == 500
        assert response.data == {"detail": "Internal server error: connection reset"}

    def test_message_is_owned_by_core(self):
        from modules.core import constants

        response = api_exception_handler(ValueError("boom"), {"view": None})
        assert response.data["detail"] == constants.INTERNAL_SERVER_ERROR.format("boom")
