from sqlalchemy import Column, Integer, String, DateTime, Date, Time, ForeignKey, Numeric, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from src.database import Base

# ================================
# Users
# ================================
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    role = Column(Enum("user", "admin", name="user_role"), nullable=False, default="user", server_default="user")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    tickets = relationship("Ticket", back_populates="user", cascade="all, delete-orphan")

# ================================
# Trains
# ================================
class Train(Base):
    __tablename__ = "trains"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    number = Column(String(50), nullable=False)
    from_station = Column(String(255), nullable=False)
    to_station = Column(String(255), nullable=False)
    departure = Column(Time, nullable=False)
    arrival = Column(Time, nullable=False)
    duration = Column(String(50), nullable=False)
    type = Column(Enum("Premium", "Superfast", "Express", "Passenger", name="train_type"), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    availability = Column(
        Enum("Available", "Limited", "Full", name="train_availability"),
        nullable=False,
        default="Available",
        server_default="Available",
    )
    rating = Column(Numeric(3, 1), nullable=False, default=4.0)

    # Relationships
    classes = relationship("TrainClass", back_populates="train", cascade="all, delete-orphan", order_by="TrainClass.id")
    amenities = relationship("TrainAmenity", back_populates="train", cascade="all, delete-orphan", order_by="TrainAmenity.id")
    tickets = relationship("Ticket", back_populates="train", cascade="all, delete-orphan")

class TrainClass(Base):
    __tablename__ = "train_classes"
    __table_args__ = (UniqueConstraint("train_id", "class", name="uq_train_class"),)

    id = Column(Integer, primary_key=True, index=True)
    train_id = Column(Integer, ForeignKey("trains.id", ondelete="CASCADE"), nullable=False, index=True)
    class_code = Column("class", String(5), nullable=False)

    # Relationships
    train = relationship("Train", back_populates="classes")

class TrainAmenity(Base):
    __tablename__ = "train_amenities"

    id = Column(Integer, primary_key=True, index=True)
    train_id = Column(Integer, ForeignKey("trains.id", ondelete="CASCADE"), nullable=False, index=True)
    amenity = Column(
        Enum("food", "wifi", "entertainment", "charging", "bedding", name="train_amenity"),
        nullable=False,
    )

    # Relationships
    train = relationship("Train", back_populates="amenities")

# ================================
# Tickets & Passengers
# ================================
class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(String(20), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    train_id = Column(Integer, ForeignKey("trains.id", ondelete="CASCADE"), nullable=False, index=True)
    journey_date = Column(Date, nullable=False)
    booking_date = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    class_code = Column("class", String(5), nullable=False)
    status = Column(
        Enum("confirmed", "waiting", "cancelled", "completed", name="ticket_status"),
        nullable=False,
        default="confirmed",
        server_default="confirmed",
        index=True,
    )
    total_amount = Column(Numeric(10, 2), nullable=False)

    # Relationships
    user = relationship("User", back_populates="tickets")
    train = relationship("Train", back_populates="tickets")
    passengers = relationship("Passenger", back_populates="ticket", cascade="all, delete-orphan", order_by="Passenger.id")

class Passenger(Base):
    __tablename__ = "passengers"

    id = Column(Integer, primary_key=True, index=True)
    ticket_id = Column(String(20), ForeignKey("tickets.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(Enum("male", "female", "other", name="passenger_gender"), nullable=False)
    seat_number = Column(Integer)

    # Relationships
    ticket = relationship("Ticket", back_populates="passengers")
