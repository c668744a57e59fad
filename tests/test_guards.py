from __future__ import annotations

import pytest
from starlette.requests import Request

from lusciana.core import guards
from lusciana.core.errors import AdminRequiredError, UnauthenticatedError


def _request(path: str = "/api/devis", headers: dict | None = None) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "path": path,
        "root_path": "",
        "query_string": b"",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
    }
    return Request(scope)


@pytest.fixture()
def rejections(monkeypatch):
    seen = []

    class _Recorder:
        def info(self, msg, *args):
            seen.append(msg % args)

    monkeypatch.setattr(guards, "logger", _Recorder())
    return seen


@pytest.mark.parametrize(
    "guard,headers,error",
    [
        (guards.TrustedHeaderIdentity(), {"x-user-email": "a@x.com"}, UnauthenticatedError),
        (guards.BearerPresencePlaceholder(), {}, UnauthenticatedError),
        (guards.BearerPresencePlaceholder(), {"Authorization": "Basic abc"}, UnauthenticatedError),
        (guards.SharedSecretAdmin("s3cret"), {"x-admin-password": "nope"}, AdminRequiredError),
    ],
)
def test_rejection_is_logged_with_guard_name(rejections, guard, headers, error):
    with pytest.raises(error):
        guard.check(_request(headers=headers))
    assert len(rejections) == 1
    assert rejections[0].startswith(f"guard {guard.name} rejected GET /api/devis")


def test_accepted_requests_are_not_logged(rejections):
    identity = guards.TrustedHeaderIdentity().check(_request(headers={"x-user-email": "a@x.com", "x-user-pseudo": "alice"}))
    assert identity == guards.Identity("a@x.com", "alice")
    assert guards.BearerPresencePlaceholder().check(_request(headers={"Authorization": "Bearer t"})) is None
    assert guards.SharedSecretAdmin("s3cret").check(_request(headers={"x-admin-password": "s3cret"})) is None
    assert guards.TrustedHeaderIdentity(required=False).check(_request()) is None
    assert rejections == []
