from __future__ import annotations

from pydantic import BaseModel


class UserBase(BaseModel):
    firstName: str
    lastName: str
    email: str
    phoneNumber: str


class User(UserBase):
    id: int
