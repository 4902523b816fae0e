from typing import Generic, TypeVar
from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class WireModel(BaseModel):
    """Base schema for the client-facing wire format.

    Fields use snake_case in Python and declare their camelCase wire name as an
    alias. ``populate_by_name`` lets services build instances with Python names
    while request bodies are parsed from the aliases; FastAPI serializes
    responses by alias.
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class DataResponse(BaseModel, Generic[T]):
    """``{"data": ...}`` envelope wrapping every API response."""
    data: T
