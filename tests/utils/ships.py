from pydantic import BaseModel


class Ship(BaseModel):
    name: str
    speed: int = 1


class ShipList(BaseModel):
    ships: list[Ship]
