from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Annotated, Any
from uuid import uuid4

from fastapi import Depends, Request

from hoopers_api.config.resources import RESOURCES, ResourceDefinition
from hoopers_api.domain.exceptions import NotFoundError, ValidationError
from hoopers_api.utils.logging import make_logger
from hoopers_api.utils.model_utils import BaseModel

logger = make_logger(__name__)


class InMemoryRecordStore:
    """
    Records for every resource held in process memory.

    Ids are assigned here on create, mirroring the backend. Records are kept
    as entity instances and copied on the way in and out.
    """

    def __init__(self):
        self._records: dict[str, dict[str, BaseModel]] = {
            name: {} for name in RESOURCES
        }

    def _table(self, definition: ResourceDefinition) -> dict[str, BaseModel]:
        return self._records.setdefault(definition.name, {})

    def records(self, definition: ResourceDefinition) -> list[BaseModel]:
        return [record.model_copy() for record in self._table(definition).values()]

    def count(self, definition: ResourceDefinition) -> int:
        return len(self._table(definition))

    def find(self, definition: ResourceDefinition, **attributes: Any) -> list[BaseModel]:
        return [
            record
            for record in self.records(definition)
            if all(getattr(record, key, None) == value for key, value in attributes.items())
        ]

    def get(self, definition: ResourceDefinition, id: str) -> BaseModel:
        record = self._table(definition).get(id)
        if record is None:
            raise NotFoundError(f"{definition.name} {id} not found")
        return record.model_copy()

    def seed(self, definition: ResourceDefinition, records: Iterable[BaseModel]) -> None:
        """Insert records that already carry their ids, e.g. fixtures."""
        table = self._table(definition)
        for record in records:
            record_id = definition.id_of(record)
            if record_id is None:
                raise ValueError(f"Seeded {definition.name} records need an id")
            table[record_id] = definition.entity.model_validate(record.model_dump())

    def create(self, definition: ResourceDefinition, record: BaseModel) -> BaseModel:
        if definition.id_of(record) is not None:
            field = definition.entity.model_fields[definition.id_attribute]
            raise ValidationError(
                f"{definition.name} ids are assigned by the server",
                field_errors={
                    field.alias or definition.id_attribute: ["Must not be set on create"]
                },
            )
        values = record.model_dump()
        values[definition.id_attribute] = uuid4().hex
        if "created_date" in definition.entity.model_fields and values.get(
            "created_date"
        ) is None:
            values["created_date"] = datetime.now(timezone.utc)
        created = definition.entity.model_validate(values)
        self._table(definition)[definition.id_of(created)] = created
        logger.info(f"Created {definition.name} {definition.id_of(created)}")
        return created.model_copy()

    def update(self, definition: ResourceDefinition, record: BaseModel) -> BaseModel:
        record_id = definition.id_of(record)
        if record_id is None:
            field = definition.entity.model_fields[definition.id_attribute]
            raise ValidationError(
                f"An id is required to update a {definition.name}",
                field_errors={field.alias or definition.id_attribute: ["Required"]},
            )
        table = self._table(definition)
        if record_id not in table:
            raise NotFoundError(f"{definition.name} {record_id} not found")
        table[record_id] = definition.entity.model_validate(record.model_dump())
        return table[record_id].model_copy()

    def delete(self, definition: ResourceDefinition, id: str) -> None:
        table = self._table(definition)
        if id not in table:
            raise NotFoundError(f"{definition.name} {id} not found")
        del table[id]
        logger.info(f"Deleted {definition.name} {id}")


def get_record_store(request: Request) -> InMemoryRecordStore:
    return request.app.state.store


DRecordStore = Annotated[InMemoryRecordStore, Depends(get_record_store)]
