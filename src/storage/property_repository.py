# src/storage/property_repository.py

"""Loads the bundled property dataset from disk."""

import json
import logging
from pathlib import Path

from src.config.settings import Settings
from src.models.property import Property

logger = logging.getLogger("property_admin.storage")


class DatasetError(Exception):
    """The property dataset could not be read or decoded."""


class PropertyRepository:
    """Read-only access to the static listing dataset."""

    def __init__(self, data_path: Path | None = None) -> None:
        self.data_path: Path = data_path or Settings.DATA_PATH
        logger.debug(
            "PropertyRepository initialised, data_path=%s", self.data_path
        )

    def load(self) -> list[Property]:
        """Read every listing in the dataset, in file order.

        Raises:
            DatasetError: the file is missing, is not valid JSON, or holds
                a record that cannot be turned into a :class:`Property`.
        """
        try:
            with open(self.data_path, encoding="utf-8") as f:
                raw = json.load(f)
        except OSError as e:
            raise DatasetError(
                f"Cannot read dataset {self.data_path}: {e}"
            ) from e
        except json.JSONDecodeError as e:
            raise DatasetError(
                f"Invalid JSON in {self.data_path}: {e}"
            ) from e

        if not isinstance(raw, list):
            raise DatasetError(
                f"Dataset {self.data_path} must hold a JSON array"
            )

        properties: list[Property] = []
        for index, entry in enumerate(raw):
            try:
                properties.append(Property.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                raise DatasetError(
                    f"Malformed record #{index} in {self.data_path}: {e!r}"
                ) from e

        logger.info(
            "Loaded %d listings from %s", len(properties), self.data_path
        )
        return properties
