# backend/pagecraft/schemas/user.py
from pydantic import Field, StrictStr

from .base import BaseSchema


class UserCreate(BaseSchema):
    username: StrictStr = Field(..., min_length=1, max_length=255)


class User(BaseSchema):
    id: str
    username: str
