"""User records. Part of the persisted schema; the translation flow never reads them."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NewUser:
    username: str
    password: str


@dataclass(frozen=True)
class User:
    id: int
    username: str
    password: str
