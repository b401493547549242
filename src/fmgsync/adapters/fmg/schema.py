"""Pydantic models describing the records of a map export.

Every payload tolerates missing fields: removed entities are exported with
most of their properties stripped, and sentinel entries carry only a name.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _flag(value: object) -> object:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in {"", "0", "false"}
    if isinstance(value, int | float):
        return bool(value)
    return value


def _zero_if_none(value: object) -> object:
    return 0 if value is None else value


def _none_if_blank(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class FmgBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    i: int | None = None
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_blank(cls, value: object) -> object:
        return "" if value is None else value


class CulturePayload(FmgBaseModel):
    color: str | None = None
    type: str | None = None
    code: str | None = None
    removed: bool = False

    _normalize_removed = field_validator("removed", mode="before")(_flag)


class CountryPayload(FmgBaseModel):
    full_name: str | None = Field(default=None, alias="fullName")
    form: str | None = Field(default=None, alias="formName")
    color: str | None = None
    culture: int = 0
    capital: int = 0
    diplomacy: list[str] = Field(default_factory=list[str])
    provinces: list[int] = Field(default_factory=list[int])
    pole: list[float] | None = None
    urban: float | None = None
    rural: float | None = None
    removed: bool = False

    _normalize_ids = field_validator("culture", "capital", mode="before")(_zero_if_none)
    _normalize_removed = field_validator("removed", mode="before")(_flag)
    _normalize_names = field_validator("full_name", "form", mode="before")(_none_if_blank)

    @field_validator("diplomacy", mode="before")
    @classmethod
    def _stringify_diplomacy(cls, value: object) -> object:
        if isinstance(value, list):
            return [str(status) for status in value]
        return value


class ProvincePayload(FmgBaseModel):
    full_name: str | None = Field(default=None, alias="fullName")
    form: str | None = Field(default=None, alias="formName")
    color: str | None = None
    state: int = 0
    burg: int = 0
    burgs: list[int] = Field(default_factory=list[int])
    pole: list[float] | None = None
    removed: bool = False

    _normalize_ids = field_validator("state", "burg", mode="before")(_zero_if_none)
    _normalize_removed = field_validator("removed", mode="before")(_flag)
    _normalize_names = field_validator("full_name", "form", mode="before")(_none_if_blank)


class BurgPayload(FmgBaseModel):
    x: float = 0.0
    y: float = 0.0
    population: float | str = 0
    size: float | None = None
    state: int = 0
    culture: int = 0
    capital: bool = False
    coast: bool = Field(default=False, validation_alias=AliasChoices("coast", "coastal"))
    port: float | None = None
    citadel: bool = False
    plaza: bool = False
    temple: bool = False
    walls: bool = False
    shanty: bool = False
    removed: bool = False

    _default_missing = field_validator("state", "culture", "population", mode="before")(
        _zero_if_none
    )
    _normalize_flags = field_validator(
        "capital",
        "coast",
        "citadel",
        "plaza",
        "temple",
        "walls",
        "shanty",
        "removed",
        mode="before",
    )(_flag)

    @property
    def is_coastal(self) -> bool:
        return self.coast or bool(self.port)


class ReligionPayload(FmgBaseModel):
    color: str | None = None
    type: str | None = None
    form: str | None = None
    deity: str | None = None
    removed: bool = False

    _normalize_removed = field_validator("removed", mode="before")(_flag)


class RiverPayload(FmgBaseModel):
    type: str | None = None
    mouth: int | list[float] | None = None
    source: int | None = None
    length: float | None = None
    discharge: float | None = None


type RecordPayload = (
    CulturePayload
    | CountryPayload
    | ProvincePayload
    | BurgPayload
    | ReligionPayload
    | RiverPayload
)
