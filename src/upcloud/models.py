"""Base models for UpCloud resources and response envelopes."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


def _drop_nulls(data: Any) -> Any:
    """Treat a JSON ``null`` object as ``{}`` and null members as absent."""
    if data is None:
        return {}
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


class Resource(BaseModel):
    """Base for UpCloud resource payloads.

    Unknown keys sent by the API are ignored so new server-side fields do not
    break decoding. ``null`` members fall back to the field default.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        return _drop_nulls(data)


class Envelope(BaseModel):
    """A JSON object with exactly one key naming the payload.

    UpCloud nests every payload one level deep, e.g. ``{"zones": {...}}``.
    Subclasses declare that single field; defining one with zero or several
    fields is a ``TypeError``. A missing or ``null`` payload decodes to the
    field default.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        return _drop_nulls(data)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if len(cls.model_fields) != 1:
            raise TypeError(f"{cls.__name__} must declare exactly one field, got {list(cls.model_fields)}")

    @classmethod
    def field_name(cls) -> str:
        return next(iter(cls.model_fields))

    def unwrap(self) -> Any:
        """Return the wrapped payload."""
        return getattr(self, self.field_name())
