"""
Enrollment (attendee registration data) and its postal address.

Key design decisions:
- One enrollment per user (unique user_id); it is the entry point for
  looking up the user's ticket.
- Address lives in its own table, loaded together with the enrollment.
"""

from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship

from hotel_booking.db.base import Base, TimestampMixin


class Enrollment(Base, TimestampMixin):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    cpf = Column(String(11), nullable=False)
    birthday = Column(Date, nullable=False)
    phone = Column(String(20), nullable=False)

    # Relationships
    user = relationship("User", back_populates="enrollment")
    address = relationship("Address", back_populates="enrollment", uselist=False)
    ticket = relationship("Ticket", back_populates="enrollment", uselist=False)

    def __repr__(self) -> str:
        return f"<Enrollment(id={self.id}, user={self.user_id})>"


class Address(Base, TimestampMixin):
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, index=True)
    enrollment_id = Column(Integer, ForeignKey("enrollments.id"), unique=True, nullable=False)
    cep = Column(String(9), nullable=False)
    street = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    state = Column(String(2), nullable=False)
    number = Column(String(20), nullable=False)
    neighborhood = Column(String(255), nullable=False)
    address_detail = Column(String(255), nullable=True)

    enrollment = relationship("Enrollment", back_populates="address")

    def __repr__(self) -> str:
        return f"<Address(id={self.id}, enrollment={self.enrollment_id}, city={self.city})>"
