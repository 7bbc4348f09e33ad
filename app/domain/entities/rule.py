"""Domain entity representing a compliance rule."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

RULE_KIND_PRESENCE = "presence"
RULE_KIND_REGEX = "regex"
RULE_KIND_LIST = "list"
RULE_KIND_RANGE = "range"
RULE_KIND_CUSTOM = "custom"

RULE_KINDS: tuple[str, ...] = (
    RULE_KIND_PRESENCE,
    RULE_KIND_REGEX,
    RULE_KIND_LIST,
    RULE_KIND_RANGE,
    RULE_KIND_CUSTOM,
)

# Product attributes a rule may inspect, with the labels shown to reviewers.
TARGET_FIELDS: dict[str, str] = {
    "name": "Product Name",
    "manufacturer": "Manufacturer",
    "mrp": "MRP",
    "net_quantity": "Net Quantity",
    "country_of_origin": "Country of Origin",
    "consumer_care_details": "Consumer Care Details",
    "date_of_manufacture": "Date of Manufacture",
}

NUMERIC_TARGET_FIELDS: frozenset[str] = frozenset({"mrp"})


@dataclass
class Rule:
    """A configurable check applied to one product field.

    ``value`` holds the JSON payload exactly as persisted; it is only trusted
    once it has been parsed against ``kind``.
    """

    id: str | None
    name: str
    target_field: str
    kind: str
    value: Any
    description: str | None
    is_active: bool
    created_by: str | None
    created_at: datetime | None
    updated_at: datetime | None


__all__ = [
    "NUMERIC_TARGET_FIELDS",
    "RULE_KINDS",
    "RULE_KIND_CUSTOM",
    "RULE_KIND_LIST",
    "RULE_KIND_PRESENCE",
    "RULE_KIND_RANGE",
    "RULE_KIND_REGEX",
    "Rule",
    "TARGET_FIELDS",
]
