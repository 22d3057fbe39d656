"""Unit tests for request authentication helpers."""

import pytest
from fastapi import HTTPException

from quill.config import AuthSettings
from quill.domain.service import JWTService
from quill.domain.value import Permission, Principal, UserId
from quill.interface.api.auth import extract_token, require_permission, require_principal

JWT_SERVICE = JWTService(AuthSettings(jwt_secret="test-secret"))


class TestExtractToken:
    """Tests for extract_token."""

    def test_bearer_header(self):
        assert extract_token("Bearer abc", None) == "abc"

    def test_scheme_is_case_insensitive(self):
        assert extract_token("bearer abc", "cookie") == "abc"

    def test_header_wins_over_cookie(self):
        assert extract_token("Bearer header", "cookie") == "header"

    @pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer ", "Bearer"])
    def test_falls_back_to_cookie(self, header):
        assert extract_token(header, "cookie") == "cookie"

    def test_nothing_given(self):
        assert extract_token(None, None) is None


class TestRequirePrincipal:
    """Tests for require_principal and require_permission."""

    def test_valid_token(self):
        token = JWT_SERVICE.create_token(5)

        principal = require_principal(JWT_SERVICE, f"Bearer {token}", None, "comment")

        assert principal.user_id == UserId(5)

    def test_missing_token_is_401(self):
        with pytest.raises(HTTPException) as exc_info:
            require_principal(JWT_SERVICE, None, None, "create comments")

        assert exc_info.value.status_code == 401
        assert "create comments" in exc_info.value.detail

    def test_missing_permission_is_403(self):
        principal = Principal(user_id=UserId(5))

        with pytest.raises(HTTPException) as exc_info:
            require_permission(principal, Permission.COMMENT_CREATE)

        assert exc_info.value.status_code == 403

    def test_granted_permission_passes(self):
        principal = Principal(
            user_id=UserId(5), permissions=frozenset({Permission.COMMENT_CREATE})
        )

        require_permission(principal, Permission.COMMENT_CREATE)
