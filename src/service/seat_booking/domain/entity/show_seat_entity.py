from decimal import Decimal
from typing import Optional

import attrs


@attrs.define
class ShowSeat:
    """One seat for one show. booking_id is None while the seat is available."""

    id: int
    show_id: int
    price: Decimal
    booking_id: Optional[int] = None

    def is_same_show_as(self, other: 'ShowSeat') -> bool:
        return self.show_id == other.show_id
