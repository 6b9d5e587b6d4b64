from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from core.exceptions import InputError

DIRECTION_IDS = (0, 1)  # 0 = outbound, 1 = inbound


@dataclass(frozen=True)
class TripFilter:
    """Optional trip filters, combined with AND. Unset fields match all trips."""

    route_id: Optional[str] = None
    direction_id: Optional[int] = None
    service_ids: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.direction_id is not None and self.direction_id not in DIRECTION_IDS:
            raise InputError(f"direction_id must be 0 or 1, got {self.direction_id}")
        # Accept any iterable of service ids, store it hashable
        object.__setattr__(self, "service_ids", tuple(self.service_ids or ()))

    @classmethod
    def for_route(
        cls,
        route_id: str,
        direction_id: Optional[int] = None,
        service_ids: Optional[Iterable[str]] = None,
    ) -> "TripFilter":
        return cls(route_id=route_id, direction_id=direction_id, service_ids=tuple(service_ids or ()))
