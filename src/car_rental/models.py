"""ORM models for the car store.

A car may be rented by one user; the association is loaded as ``userCar``
in listings and joined as an outer join unless the include is required.
"""

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all car rental ORM models."""
    pass


class UserModel(Base):
    """A customer who can rent cars."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    rented_cars: Mapped[list["CarModel"]] = relationship(back_populates="user_car")


class CarModel(Base):
    """A rentable car."""
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(100))
    price: Mapped[float | None] = mapped_column(Float)
    size: Mapped[str | None] = mapped_column(String(20), index=True)
    image: Mapped[str | None] = mapped_column(String(255))
    is_currently_rented: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    renter_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True,
    )

    user_car: Mapped[UserModel | None] = relationship(back_populates="rented_cars")
