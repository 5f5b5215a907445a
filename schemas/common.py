"""Shared schema pieces for stored documents."""

import uuid
from datetime import datetime
from typing import Annotated, Any, Dict

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from utils.helpers import to_naive_utc, utcnow

UTCDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]


def new_id() -> str:
    return str(uuid.uuid4())


def computed_exclude(model: BaseModel) -> Dict[str, Any]:
    """model_dump exclude mapping that drops computed fields, nested models included."""
    exclude: Dict[str, Any] = {name: True for name in type(model).model_computed_fields}
    for name in type(model).model_fields:
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            nested = computed_exclude(value)
            if nested:
                exclude[name] = nested
    return exclude


class Schema(BaseModel):
    """Base for models that end up inside stored documents."""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, validate_default=True)


class Document(Schema):
    """Base for collection models stored with a string _id."""
    id: str = Field(default_factory=new_id, alias="_id", description="Document identifier")
    created_at: UTCDatetime = Field(default_factory=utcnow)
    updated_at: UTCDatetime = Field(default_factory=utcnow)

    def to_document(self) -> Dict[str, Any]:
        """Dump to the shape stored in MongoDB; derived values are left to the API responses."""
        return self.model_dump(by_alias=True, exclude=computed_exclude(self))
