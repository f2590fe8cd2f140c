# src/models/property.py

"""Property listing data model shared by search, listing and UI."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Property:
    """A single real-estate listing from the bundled dataset.

    Records are loaded once at startup and never mutated; search and
    listing only build derived views over them.
    """

    id: str
    title: str
    price: float
    location: str
    area: float
    type: str
    status: str
    office: str
    date: str                     # DD-MM-YYYY
    currency: str = "EUR"
    images: tuple[str, ...] = ()
    bedrooms: int | None = None
    bathrooms: int | None = None
    features: tuple[str, ...] | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Property":
        """Build a record from one JSON object of the dataset."""
        features = data.get("features")
        return cls(
            id=str(data["id"]),
            title=data["title"],
            price=float(data["price"]),
            location=data["location"],
            area=float(data["area"]),
            type=data["type"],
            status=data["status"],
            office=data["office"],
            date=data["date"],
            currency=data.get("currency", "EUR"),
            images=tuple(data.get("images") or ()),
            bedrooms=data.get("bedrooms"),
            bathrooms=data.get("bathrooms"),
            features=tuple(features) if features is not None else None,
            description=data.get("description"),
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise back to the dataset's JSON shape."""
        data: dict[str, object] = {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "currency": self.currency,
            "location": self.location,
            "area": self.area,
            "type": self.type,
            "status": self.status,
            "office": self.office,
            "images": list(self.images),
            "date": self.date,
        }
        if self.bedrooms is not None:
            data["bedrooms"] = self.bedrooms
        if self.bathrooms is not None:
            data["bathrooms"] = self.bathrooms
        if self.features is not None:
            data["features"] = list(self.features)
        if self.description is not None:
            data["description"] = self.description
        return data
