# tests/test_property_model.py

"""Tests for the Property dataclass."""

import dataclasses
import unittest

from src.models.property import Property

_FULL = {
    "id": "REF-1",
    "title": "Piso con terraza",
    "price": 325000,
    "currency": "EUR",
    "location": "Madrid Centro",
    "bedrooms": 3,
    "bathrooms": 2,
    "area": 95,
    "type": "piso",
    "status": "venta",
    "office": "Oficina Centro",
    "features": ["terraza"],
    "description": "Exterior.",
    "images": ["a.jpg"],
    "date": "15-03-2024",
}


class TestPropertyModel(unittest.TestCase):
    """Property dataclass unit tests."""

    def test_from_dict_all_fields(self) -> None:
        prop = Property.from_dict(_FULL)
        self.assertEqual(prop.id, "REF-1")
        self.assertEqual(prop.price, 325000.0)
        self.assertEqual(prop.bedrooms, 3)
        self.assertEqual(prop.features, ("terraza",))
        self.assertEqual(prop.images, ("a.jpg",))
        self.assertEqual(prop.date, "15-03-2024")

    def test_from_dict_optional_defaults(self) -> None:
        """Optional fields become None, images an empty tuple."""
        data = {
            k: v
            for k, v in _FULL.items()
            if k not in ("bedrooms", "bathrooms", "features",
                         "description", "images", "currency")
        }
        prop = Property.from_dict(data)
        self.assertIsNone(prop.bedrooms)
        self.assertIsNone(prop.bathrooms)
        self.assertIsNone(prop.features)
        self.assertIsNone(prop.description)
        self.assertEqual(prop.images, ())
        self.assertEqual(prop.currency, "EUR")

    def test_from_dict_missing_required_raises(self) -> None:
        with self.assertRaises(KeyError):
            Property.from_dict({"id": "X"})

    def test_to_dict_round_trip_keys(self) -> None:
        prop = Property.from_dict(_FULL)
        self.assertEqual(set(prop.to_dict()), set(_FULL))

    def test_to_dict_omits_absent_optionals(self) -> None:
        prop = Property.from_dict({**_FULL, "bedrooms": None})
        self.assertNotIn("bedrooms", prop.to_dict())

    def test_is_frozen(self) -> None:
        prop = Property.from_dict(_FULL)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            prop.price = 1.0  # type: ignore[misc]

    def test_equality(self) -> None:
        self.assertEqual(Property.from_dict(_FULL), Property.from_dict(_FULL))

    def test_is_hashable(self) -> None:
        """Equal records collapse in a set."""
        prop = Property.from_dict(_FULL)
        self.assertEqual(hash(prop), hash(Property.from_dict(_FULL)))
        self.assertEqual(len({prop, Property.from_dict(_FULL)}), 1)


if __name__ == "__main__":
    unittest.main()
