from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ProductInfo:
    id: int
    name: str
    price: float
    volume: str = ""
    description: str = ""
    image: str = ""
