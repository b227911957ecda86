"""Input models: BOM line items, legacy room totals and catalog pages."""

from __future__ import annotations

from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roomcost.costing.coercion import coerce_number


def _blank_if_none(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class BOMItem(BaseModel):
    """One line item of the AV bill of materials.

    ``unit_cost`` and ``qty`` are kept exactly as the catalog sent them;
    coercion to numbers happens during aggregation.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    room_type: str = ""
    description: str | None = None
    make: str | None = None
    model: str | None = None
    unit_cost: Any = None
    qty: Any = None

    @field_validator("room_type", mode="before")
    @classmethod
    def _room_type_to_str(cls, value: Any) -> str:
        return _blank_if_none(value)

    @field_validator("description", "make", "model", mode="before")
    @classmethod
    def _identity_to_str(cls, value: Any) -> str | None:
        if value is None:
            return None
        return str(value)

    @property
    def component_key(self) -> ComponentKey:
        return ComponentKey.of(self)


class ComponentKey(NamedTuple):
    """Identity of a physical component within a room type.

    Compared by value as a tuple, so field contents can never collide the
    way a delimiter-joined string key could.
    """

    description: str
    make: str
    model: str

    @classmethod
    def of(cls, item: BOMItem) -> ComponentKey:
        return cls(item.description or "", item.make or "", item.model or "")


class LegacyRoomCost(BaseModel):
    """A previously published aggregate total for one room type."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int | None = None
    room_type: str
    total_cost: float = 0.0

    @field_validator("room_type", mode="before")
    @classmethod
    def _room_type_to_str(cls, value: Any) -> str:
        return _blank_if_none(value)

    @field_validator("total_cost", mode="before")
    @classmethod
    def _coerce_total(cls, value: Any) -> float:
        return coerce_number(value)


class PageMeta(BaseModel):
    """Pagination metadata reported by the catalog for one page."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    page: int = 1
    page_size: int | None = Field(default=None, alias="pageSize")
    page_count: int = Field(alias="pageCount")
    total: int | None = None


class CatalogPage(BaseModel):
    """A single page of records returned by the catalog."""

    data: list[dict[str, Any]]
    pagination: PageMeta

    @classmethod
    def from_payload(cls, payload: Any) -> CatalogPage:
        """Build a page from the catalog's ``{"data", "meta"}`` envelope.

        Raises:
            ValueError: If the envelope is missing ``data`` or
                ``meta.pagination``.  Pydantic's ``ValidationError`` is a
                ``ValueError`` subclass and propagates unchanged.
        """
        if not isinstance(payload, dict):
            msg = f"Expected a JSON object, got {type(payload).__name__}"
            raise ValueError(msg)
        meta = payload.get("meta")
        if not isinstance(meta, dict) or "pagination" not in meta:
            msg = "Response is missing meta.pagination"
            raise ValueError(msg)
        return cls(data=payload.get("data"), pagination=meta["pagination"])
