"""Login credentials and serialized session schemas.

Login credentials arrive as an object carrying exactly one credential kind::

    {"custom": {"label": "...", "apiKey": "...", "baseURL": "..."}}
    {"cookieJarJSON": {...}, "lastURL": "..."}
    {"jsCodeResult": "..."}
    {"username": "...", "password": "...", "code": "..."}

Each kind is its own model with ``extra="forbid"`` so that the ``LoginCreds``
union resolves to a single member; a body matching none of them fails
validation instead of being silently treated as some default kind.
"""
from typing import Any, ClassVar, Union
from pydantic import ConfigDict, Field
from .base import WireModel
from .user import CurrentUser


class _Creds(WireModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")
    kind: ClassVar[str]


class CustomCreds(_Creds):
    kind: ClassVar[str] = "custom"
    custom: dict[str, Any]


class CookieJarCreds(_Creds):
    kind: ClassVar[str] = "cookie_jar"
    cookie_jar_json: Any = Field(alias="cookieJarJSON")
    last_url: str | None = Field(default=None, alias="lastURL")


class JsCodeCreds(_Creds):
    kind: ClassVar[str] = "js_code"
    js_code_result: str = Field(alias="jsCodeResult")


class PasswordCreds(_Creds):
    kind: ClassVar[str] = "password"
    username: str
    password: str
    code: str | None = None


LoginCreds = Union[CustomCreds, CookieJarCreds, JsCodeCreds, PasswordCreds]


class LoginRequest(WireModel):
    creds: LoginCreds
    current_user_id: str = Field(alias="currentUserID")


class LoginResult(WireModel):
    current_user: CurrentUser = Field(alias="currentUser")
    extra: dict[str, Any] | None = None


class SerializedSession(WireModel):
    current_user: CurrentUser = Field(alias="currentUser")
    extra: dict[str, Any] = Field(default_factory=dict)


class InitRequest(WireModel):
    session: SerializedSession
