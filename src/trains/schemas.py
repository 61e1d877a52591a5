from pydantic import BaseModel, Field
from typing import List, Literal

TrainType = Literal["Premium", "Superfast", "Express", "Passenger"]
Availability = Literal["Available", "Limited", "Full"]

class TrainSummary(BaseModel):
    """Train fields embedded in ticket responses"""
    name: str
    number: str
    from_station: str = Field(..., alias="from")
    to_station: str = Field(..., alias="to")
    departure: str
    arrival: str
    duration: str

    class Config:
        populate_by_name = True

class Train(TrainSummary):
    id: str
    price: float
    availability: Availability
    rating: float
    type: TrainType
    classes: List[str] = []
    amenities: List[str] = []
