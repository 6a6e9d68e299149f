"""Fetching user details from common OAuth2 providers."""

from __future__ import annotations

import json
from typing import Any, Optional

import requests

OAUTH2_UID = "uid"
OAUTH2_EMAIL = "email"
OAUTH2_NAME = "name"

GOOGLE_INFO_ENDPOINT = "https://www.googleapis.com/userinfo/v2/me"
FACEBOOK_INFO_ENDPOINT = "https://graph.facebook.com/me?fields=name,email"


class ProviderError(Exception):
    """Raised when a provider's user details cannot be fetched or read."""


def _fetch(url: str, access_token: str, session: Optional[Any], provider: str) -> dict[str, Any]:
    client = session if session is not None else requests.Session()
    try:
        response = client.get(url, headers={"Authorization": f"Bearer {access_token}"})
    except requests.RequestException as exc:
        raise ProviderError(f"failed to reach {provider} oauth2 endpoint") from exc
    try:
        body = json.loads(response.content)
    except (ValueError, TypeError) as exc:
        raise ProviderError(f"failed to parse json from {provider} oauth2 endpoint") from exc
    if not isinstance(body, dict):
        raise ProviderError(f"unexpected json from {provider} oauth2 endpoint")
    return body


def _field(body: dict[str, Any], key: str, provider: str) -> str:
    value = body.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ProviderError(f"field {key!r} from {provider} oauth2 endpoint is not a string")
    return value


def google_user_details(access_token: str, session: Optional[Any] = None) -> dict[str, str]:
    """Return the uid and e-mail of the Google user owning ``access_token``."""
    body = _fetch(GOOGLE_INFO_ENDPOINT, access_token, session, "google")
    return {
        OAUTH2_UID: _field(body, "id", "google"),
        OAUTH2_EMAIL: _field(body, "email", "google"),
    }


def facebook_user_details(access_token: str, session: Optional[Any] = None) -> dict[str, str]:
    """Return the uid, e-mail and name of the Facebook user owning ``access_token``."""
    body = _fetch(FACEBOOK_INFO_ENDPOINT, access_token, session, "facebook")
    return {
        OAUTH2_UID: _field(body, "id", "facebook"),
        OAUTH2_EMAIL: _field(body, "email", "facebook"),
        OAUTH2_NAME: _field(body, "name", "facebook"),
    }