from __future__ import annotations

# Base visit price per service category, in whole rupees.
PRICE_TABLE: dict[str, int] = {
    "plumbing": 499,
    "electrical": 599,
    "cleaning": 399,
    "painting": 899,
    "carpentry": 699,
    "ac": 499,
}


def price_for_category(category: str) -> int | None:
    return PRICE_TABLE.get((category or "").strip().lower())
