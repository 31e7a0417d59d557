"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.seat_booking.driven_adapter.model.booking_model import BookingModel
from src.service.seat_booking.driven_adapter.model.cinema_model import CinemaModel, TheaterModel
from src.service.seat_booking.driven_adapter.model.payment_model import PaymentModel
from src.service.seat_booking.driven_adapter.model.show_model import (
    MovieModel,
    PlaysModel,
    ShowModel,
)
from src.service.seat_booking.driven_adapter.model.show_seat_model import ShowSeatModel
from src.service.seat_booking.driven_adapter.model.user_model import UserModel

__all__ = [
    'BookingModel',
    'CinemaModel',
    'MovieModel',
    'PaymentModel',
    'PlaysModel',
    'ShowModel',
    'ShowSeatModel',
    'TheaterModel',
    'UserModel',
]
