from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SubService:
    name: str
    description: str | None = None
    price: str | None = None
    duration: str | None = None


@dataclass(frozen=True)
class ServiceEntry:
    id: str
    title: str
    description: str
    icon: str
    category: str
    price: str  # display string, e.g. "₹599 onwards"
    border_color: str = "#667eea"
    subservices: Tuple[SubService, ...] = ()


@dataclass(frozen=True)
class Technician:
    id: str
    name: str
    specialization: str  # a service category
    experience_years: int = 0
    rating: float | None = None
    phone: str | None = None
