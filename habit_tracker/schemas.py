# backend/habit_tracker/schemas.py
import datetime as dt
import re
from typing import Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ValidationError
from .models.habit import DEFAULT_COLOR, DEFAULT_FREQUENCY, FREQUENCIES


ISO_DAY = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_iso_day(value):
    """Parse a strict YYYY-MM-DD string; raises ValueError for anything else."""
    if not isinstance(value, str) or not ISO_DAY.fullmatch(value.strip()):
        raise ValueError("date must be in YYYY-MM-DD format")
    try:
        return dt.datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValueError("date must be in YYYY-MM-DD format")


def _required(value, field):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{field} is required")
    return value


class _Body(BaseModel):
    # run validators on omitted fields too, so "missing" and "blank" fail the same way
    model_config = ConfigDict(validate_default=True, extra="ignore")


class RegisterRequest(_Body):
    name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    password: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def stripped(cls, v, info):
        v = _required(v, info.field_name).strip()
        return v.lower() if info.field_name == "email" else v

    @field_validator("password")
    @classmethod
    def password_required(cls, v):
        # do NOT strip passwords
        return _required(v, "password")


class LoginRequest(_Body):
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email")
    @classmethod
    def email_required(cls, v):
        return _required(v, "email").strip().lower()

    @field_validator("password")
    @classmethod
    def password_required(cls, v):
        return _required(v, "password")


class HabitRequest(_Body):
    """Body for both POST /habits and PUT /habits/<id>."""

    # lengths follow the habits table columns
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    color: Optional[str] = Field(default=None, max_length=20)
    frequency: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_required(cls, v):
        return _required(v, "title").strip()

    @field_validator("color")
    @classmethod
    def default_color(cls, v):
        return v.strip() if v and v.strip() else DEFAULT_COLOR

    @field_validator("frequency")
    @classmethod
    def known_frequency(cls, v):
        if not v or not v.strip():
            return DEFAULT_FREQUENCY
        v = v.strip().lower()
        if v not in FREQUENCIES:
            raise ValueError(f"frequency must be one of: {', '.join(FREQUENCIES)}")
        return v

    def habit_fields(self):
        return {
            "title": self.title,
            "description": self.description,
            "color": self.color,
            "frequency": self.frequency,
            "notes": self.notes,
        }


class ToggleRequest(_Body):
    day: Optional[dt.date] = Field(default=None, alias="date")

    @field_validator("day", mode="before")
    @classmethod
    def date_required(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("date is required")
        return parse_iso_day(v)


def parse_body(schema, data):
    """Validate a JSON body against `schema`, raising ValidationError on failure."""
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as err:
        first = err.errors()[0]
        msg = first.get("msg", "invalid request")
        if first.get("type") == "value_error":
            # pydantic prefixes messages raised inside validators
            raise ValidationError(msg.removeprefix("Value error, "))
        field = ".".join(str(p) for p in first.get("loc", ())) or "body"
        raise ValidationError(f"{field}: {msg}")
