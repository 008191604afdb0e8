"""
Base class for records read back from the document store.
"""

from typing import Any, Dict, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict

RecordT = TypeVar("RecordT", bound="Record")


class Record(BaseModel):
    """
    A stored document decoded into its record shape.

    Subclasses declare an ``id`` field whose alias is the wire name of the
    identifier (``property_id``, ``listing_id``, ...). The store keeps it under ``_id``.
    """

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def id_key(cls) -> str:
        field = cls.model_fields["id"]
        return field.alias or "id"

    @classmethod
    def from_document(cls: type[RecordT], document: Mapping[str, Any]) -> RecordT:
        """
        Decode a raw store document.

        Raises:
            pydantic.ValidationError: If the document does not match the record shape
        """
        data: Dict[str, Any] = dict(document)
        if "_id" in data:
            data[cls.id_key()] = str(data.pop("_id"))
        return cls.model_validate(data)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"
