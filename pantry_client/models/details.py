from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field

if TYPE_CHECKING:
    from ..models.basket_summary import BasketSummary


T = TypeVar("T", bound="Details")


@_attrs_define
class Details:
    """Snapshot of a pantry and the baskets stored in it.

    Attributes:
        name (str):
        description (str):
        errors (list[str]):
        notifications (bool):
        percent_full (float): Wire key ``percentFull``.
        baskets (list[BasketSummary]):
    """

    name: str
    description: str
    errors: list[str]
    notifications: bool
    percent_full: float
    baskets: list[BasketSummary]
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        errors = self.errors

        baskets = []
        for baskets_item_data in self.baskets:
            baskets_item = baskets_item_data.to_dict()
            baskets.append(baskets_item)

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "name": self.name,
                "description": self.description,
                "errors": errors,
                "notifications": self.notifications,
                "percentFull": self.percent_full,
                "baskets": baskets,
            }
        )

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.basket_summary import BasketSummary

        d = dict(src_dict)
        name = d.pop("name")

        description = d.pop("description")

        errors = cast(list[str], d.pop("errors"))

        notifications = d.pop("notifications")

        percent_full = d.pop("percentFull")

        baskets = []
        for baskets_item_data in d.pop("baskets"):
            baskets_item = BasketSummary.from_dict(baskets_item_data)
            baskets.append(baskets_item)

        details = cls(
            name=name,
            description=description,
            errors=errors,
            notifications=notifications,
            percent_full=percent_full,
            baskets=baskets,
        )

        details.additional_properties = d
        return details

    @property
    def basket_names(self) -> list[str]:
        return [basket.name for basket in self.baskets]

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties
