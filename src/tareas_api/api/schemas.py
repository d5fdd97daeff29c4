# src/tareas_api/api/schemas.py

from __future__ import annotations

from pydantic import BaseModel, field_validator


def _encodable(value: str | None) -> str | None:
    # JSON allows escaped lone surrogates ("\ud800") that cannot be stored as UTF-8.
    if value is not None:
        value.encode("utf-8")
    return value


# Fields are optional on purpose: handlers answer missing/empty values
# with their own 400 bodies instead of pydantic's validation report.


class TaskIn(BaseModel):
    titulo: str | None = None
    descripcion: str | None = None

    @field_validator("titulo", "descripcion")
    @classmethod
    def _check_encodable(cls, value: str | None) -> str | None:
        return _encodable(value)


class CredentialsIn(BaseModel):
    username: str | None = None
    password: str | None = None

    @field_validator("username", "password")
    @classmethod
    def _check_encodable(cls, value: str | None) -> str | None:
        return _encodable(value)
