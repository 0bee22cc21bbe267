"""
Data Object

Base entity for SubscribePro API resources.

A data object is a mutable attribute bag for one remote resource. It knows
whether it has ever been persisted (an `id` assigned by the API) and whether
it carries local changes since it was built or last hydrated.

Two ways to populate an entity from API data:
    - DataFactory.create(data)   -> new instance (load operations)
    - entity.import_data(data)   -> merge into the same instance (save operations)
"""

import copy
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel

from .exceptions import EntityInvalidDataError, InvalidArgumentError

logger = logging.getLogger(__name__)


class DataObject:
    """Attribute bag with persistence and local-change tracking"""

    ID = "id"

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = {}
        self._dirty = False
        if data:
            self._load(data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.get_id()!r}, dirty={self._dirty})"

    # ============ Identity & State ============

    @property
    def id(self) -> Optional[Any]:
        return self._data.get(self.ID)

    def get_id(self) -> Optional[Any]:
        return self._data.get(self.ID)

    def is_new(self) -> bool:
        """True until the API has assigned an id"""
        return self.get_id() is None

    def is_dirty(self) -> bool:
        """True when attributes changed since construction or last hydration"""
        return self._dirty

    # ============ Attribute Access ============

    def get(self, key: str, default: Any = None) -> Any:
        value = self._data.get(key)
        return default if value is None else value

    def has(self, key: str) -> bool:
        return self._data.get(key) is not None

    def set(self, key: str, value: Any) -> "DataObject":
        """Set one attribute and mark the entity dirty"""
        if key == self.ID:
            raise InvalidArgumentError(
                f"'{self.ID}' is assigned by the API and can't be set directly"
            )
        self._data[key] = self._normalize(key, value)
        self._dirty = True
        return self

    def import_data(self, data: Optional[Mapping[str, Any]]) -> "DataObject":
        """
        Hydrate this instance from API data

        Server values overwrite local ones, keys absent from `data` are kept.
        Clears the dirty flag and returns the same instance.
        """
        self._load(data or {})
        self._dirty = False
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Deep copy of all attributes, nested models exported as dicts"""
        return {key: self._export(value) for key, value in self._data.items()}

    # ============ Hooks ============

    def _normalize(self, key: str, value: Any) -> Any:
        """Coerce a raw value for `key` before it is stored"""
        return value

    # ============ Internals ============

    def _load(self, data: Mapping[str, Any]) -> None:
        # Normalize everything first so a rejected value leaves the entity untouched
        normalized = {key: self._normalize(key, value) for key, value in data.items()}
        self._data.update(normalized)

    @classmethod
    def _export(cls, value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value.model_dump(exclude_unset=True)
        if isinstance(value, list):
            return [cls._export(item) for item in value]
        if isinstance(value, dict):
            return {k: cls._export(v) for k, v in value.items()}
        return copy.deepcopy(value)

    def _build_form_data(self, fields: Mapping[str, bool], form_name: str) -> Dict[str, Any]:
        """
        Project attributes onto a request payload

        Args:
            fields: Ordered mapping of field name -> required flag
            form_name: Used in the error message

        Returns:
            Payload holding only the fields that are set

        Raises:
            EntityInvalidDataError: If a required field is not set
        """
        form_data: Dict[str, Any] = {}
        missing = []
        for field, required in fields.items():
            value = self._data.get(field)
            if value is None or value == "":
                if required:
                    missing.append(field)
                continue
            form_data[field] = self._export(value)

        if missing:
            logger.warning(f"{self.__class__.__name__} missing required fields for {form_name}: {missing}")
            raise EntityInvalidDataError(
                f"Not all required fields are set for {form_name}: {', '.join(missing)}"
            )
        return form_data


__all__ = ["DataObject"]
