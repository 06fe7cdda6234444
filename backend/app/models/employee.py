"""Employee models: the normalized API shape and the random-user payload it is built from."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API models serialized as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Address(CamelModel):
    street: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str = ""


class Employee(CamelModel):
    """Directory record derived from one random-user result."""

    id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    picture_url: str = ""
    address: Address = Field(default_factory=Address)


# Upstream payload (https://randomuser.me/documentation). Only the fields we map are declared.


class RandomUserModel(BaseModel):
    """Upstream record part; a JSON null in any field falls back to that field's default."""

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class RandomUserName(RandomUserModel):
    first: str = ""
    last: str = ""


class RandomUserStreet(RandomUserModel):
    number: int = 0
    name: str = ""


class RandomUserLocation(RandomUserModel):
    street: RandomUserStreet = Field(default_factory=RandomUserStreet)
    city: str = ""
    state: str = ""
    country: str = ""
    # string or number depending on the nationality; resolved when mapping
    postcode: Any = None


class RandomUserPicture(RandomUserModel):
    large: str = ""
    medium: str = ""
    thumbnail: str = ""


class RandomUserLogin(RandomUserModel):
    uuid: str = ""


class RandomUserResult(RandomUserModel):
    name: RandomUserName = Field(default_factory=RandomUserName)
    email: str = ""
    phone: str = ""
    picture: RandomUserPicture = Field(default_factory=RandomUserPicture)
    location: RandomUserLocation = Field(default_factory=RandomUserLocation)
    login: RandomUserLogin = Field(default_factory=RandomUserLogin)


class RandomUserResponse(RandomUserModel):
    results: list[RandomUserResult] | None = None
