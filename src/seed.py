from datetime import time
from decimal import Decimal

from sqlalchemy.orm import Session

from src.auth.utils import get_password_hash
from src.models import User, Train, TrainClass, TrainAmenity
from src.logger import logger

DEFAULT_USERS = [
    {"name": "Admin User", "email": "admin@indiarail.com", "password": "admin123", "role": "admin"},
    {"name": "Test User", "email": "user@example.com", "password": "user123", "role": "user"},
]

DEFAULT_TRAINS = [
    {
        "name": "Rajdhani Express",
        "number": "12301",
        "from_station": "New Delhi",
        "to_station": "Mumbai Central",
        "departure": time(16, 50),
        "arrival": time(8, 35),
        "duration": "15h 45m",
        "type": "Superfast",
        "price": Decimal("1450"),
        "availability": "Available",
        "rating": Decimal("4.7"),
        "classes": ["SL", "3A", "2A", "1A"],
        "amenities": ["food", "wifi", "entertainment", "charging", "bedding"],
    },
    {
        "name": "Shatabdi Express",
        "number": "12002",
        "from_station": "New Delhi",
        "to_station": "Bhopal",
        "departure": time(6, 15),
        "arrival": time(14, 10),
        "duration": "7h 55m",
        "type": "Premium",
        "price": Decimal("850"),
        "availability": "Limited",
        "rating": Decimal("4.5"),
        "classes": ["CC", "EC"],
        "amenities": ["food", "wifi", "entertainment", "charging"],
    },
    {
        "name": "Duronto Express",
        "number": "12213",
        "from_station": "Mumbai CST",
        "to_station": "Delhi Sarai Rohilla",
        "departure": time(23, 10),
        "arrival": time(16, 25),
        "duration": "17h 15m",
        "type": "Superfast",
        "price": Decimal("1250"),
        "availability": "Available",
        "rating": Decimal("4.3"),
        "classes": ["SL", "3A", "2A"],
        "amenities": ["food", "bedding", "charging"],
    },
    {
        "name": "Vande Bharat Express",
        "number": "22435",
        "from_station": "New Delhi",
        "to_station": "Varanasi",
        "departure": time(6, 0),
        "arrival": time(14, 0),
        "duration": "8h 00m",
        "type": "Premium",
        "price": Decimal("1950"),
        "availability": "Available",
        "rating": Decimal("4.9"),
        "classes": ["CC", "EC"],
        "amenities": ["food", "wifi", "entertainment", "charging"],
    },
    {
        "name": "Tejas Express",
        "number": "22119",
        "from_station": "Mumbai CST",
        "to_station": "Karmali",
        "departure": time(5, 50),
        "arrival": time(14, 15),
        "duration": "8h 25m",
        "type": "Premium",
        "price": Decimal("1200"),
        "availability": "Limited",
        "rating": Decimal("4.5"),
        "classes": ["CC", "EC"],
        "amenities": ["food", "wifi", "entertainment", "charging"],
    },
]


def seed_users(db: Session) -> int:
    """Insert the default admin and test user when the users table is empty"""
    if db.query(User).first():
        return 0

    users = [
        User(
            name=data["name"],
            email=data["email"],
            password=get_password_hash(data["password"]),
            role=data["role"],
        )
        for data in DEFAULT_USERS
    ]
    db.add_all(users)
    db.flush()
    logger.info(f"Seeded {len(users)} default users")
    return len(users)


def seed_trains(db: Session) -> int:
    """Insert the default trains with their classes and amenities when none exist"""
    if db.query(Train).first():
        return 0

    for data in DEFAULT_TRAINS:
        fields = {k: v for k, v in data.items() if k not in ("classes", "amenities")}
        train = Train(**fields)
        train.classes = [TrainClass(class_code=code) for code in data["classes"]]
        train.amenities = [TrainAmenity(amenity=amenity) for amenity in data["amenities"]]
        db.add(train)
        # Flush per train so ids follow list order
        db.flush()

    logger.info(f"Seeded {len(DEFAULT_TRAINS)} default trains")
    return len(DEFAULT_TRAINS)


def seed_database(db: Session) -> None:
    try:
        seed_users(db)
        seed_trains(db)
        db.commit()
    except Exception:
        logger.exception("Error seeding data")
        db.rollback()
        raise
