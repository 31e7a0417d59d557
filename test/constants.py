# Test Utility Constants

from datetime import date
from decimal import Decimal


# Users
ALICE_EMAIL = 'alice@test.com'
BOB_EMAIL = 'bob@test.com'

# Cinemas
AMC = 'AMC'
REGAL = 'Regal'
CLOSURE_DATE = date(2019, 2, 2)
NEXT_DAY = date(2019, 2, 3)

# Shows
AMC_EVENING_SHOW = 1  # AMC screen 1, 2019-02-02
AMC_LATE_SHOW = 2  # AMC screen 2, 2019-02-02
AMC_NEXT_DAY_SHOW = 3  # AMC screen 1, 2019-02-03
REGAL_EVENING_SHOW = 4  # Regal screen 1, 2019-02-02

# Seats
STANDARD_PRICE = Decimal('12.50')
PREMIUM_PRICE = Decimal('18.00')
SEAT_PRICES: dict[int, tuple[int, Decimal]] = {
    # ssid: (show, price)
    10: (AMC_EVENING_SHOW, STANDARD_PRICE),
    11: (AMC_EVENING_SHOW, STANDARD_PRICE),
    12: (AMC_EVENING_SHOW, PREMIUM_PRICE),
    13: (AMC_EVENING_SHOW, STANDARD_PRICE),
    20: (AMC_LATE_SHOW, STANDARD_PRICE),
    30: (AMC_NEXT_DAY_SHOW, STANDARD_PRICE),
    40: (REGAL_EVENING_SHOW, STANDARD_PRICE),
}
MISSING_SEAT_ID = 999
MISSING_BOOKING_ID = 9999
