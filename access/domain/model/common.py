"""Domain model base class."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class of the invitation domain models.

    Models are frozen; changes produce a copy via ``model_copy``. Fields
    accept both their Python name and the camelCase alias of the access
    API.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
