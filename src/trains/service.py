from sqlalchemy.orm import Session, selectinload
from typing import List, Optional, Union
from src.models import Train
from src.trains.schemas import Train as TrainSchema, TrainSummary
from src.exceptions import TrainNotFound

def format_time(value) -> str:
    """Render a TIME column as HH:MM"""
    if value is None:
        return ""
    if isinstance(value, str):
        return value[:5]
    return value.strftime("%H:%M")

class TrainService:
    @staticmethod
    def get_trains(db: Session) -> List[Train]:
        """Get all trains with their classes and amenities"""
        return db.query(Train).options(
            selectinload(Train.classes),
            selectinload(Train.amenities)
        ).order_by(Train.id).all()

    @staticmethod
    def get_train_by_id(db: Session, train_id: Union[int, str]) -> Optional[Train]:
        """Get train by ID; ids that are not integers match nothing"""
        try:
            train_id = int(train_id)
        except (TypeError, ValueError):
            return None

        return db.query(Train).options(
            selectinload(Train.classes),
            selectinload(Train.amenities)
        ).filter(Train.id == train_id).first()

    @staticmethod
    def get_train_or_404(db: Session, train_id: Union[int, str]) -> Train:
        train = TrainService.get_train_by_id(db, train_id)
        if not train:
            raise TrainNotFound()
        return train

    @staticmethod
    def to_summary(train: Train) -> TrainSummary:
        return TrainSummary(
            name=train.name,
            number=train.number,
            from_station=train.from_station,
            to_station=train.to_station,
            departure=format_time(train.departure),
            arrival=format_time(train.arrival),
            duration=train.duration
        )

    @staticmethod
    def to_schema(train: Train) -> TrainSchema:
        return TrainSchema(
            id=str(train.id),
            name=train.name,
            number=train.number,
            from_station=train.from_station,
            to_station=train.to_station,
            departure=format_time(train.departure),
            arrival=format_time(train.arrival),
            duration=train.duration,
            price=train.price,
            availability=train.availability,
            rating=train.rating,
            type=train.type,
            classes=[c.class_code for c in train.classes],
            amenities=[a.amenity for a in train.amenities]
        )
