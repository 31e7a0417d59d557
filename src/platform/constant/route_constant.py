# Booking lifecycle
BOOKING_BASE = '/api/booking'
BOOKING_CANCEL_PENDING = f'{BOOKING_BASE}/cancel-pending'
BOOKING_CLOSURE = f'{BOOKING_BASE}/closure'
BOOKING_PURGE_CANCELLED = f'{BOOKING_BASE}/cancelled'
BOOKING_CANCEL = f'{BOOKING_BASE}/{{booking_id}}/cancel'
BOOKING_SWAP_SEAT = f'{BOOKING_BASE}/{{booking_id}}/seat'

# Payment
PAYMENT_BASE = '/api/payment'
PAYMENT_REMOVE = f'{PAYMENT_BASE}/{{payment_id}}'

# Common
HEALTH = '/health'
METRICS = '/metrics'
