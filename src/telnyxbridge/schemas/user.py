from pydantic import Field
from .base import WireModel


class UserRead(WireModel):
    id: str
    full_name: str | None = Field(default=None, alias="fullName")
    img_url: str | None = Field(default=None, alias="imgURL")
    is_self: bool = Field(default=False, alias="isSelf")


class CurrentUser(WireModel):
    id: str
    username: str | None = None
    display_text: str | None = Field(default=None, alias="displayText")


class SearchUsersRequest(WireModel):
    typed: str = ""
    current_user_id: str = Field(alias="currentUserID")
