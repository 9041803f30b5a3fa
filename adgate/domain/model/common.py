"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen; state changes produce a new instance via ``updated``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def updated(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied and re-validated.

        Unlike ``model_copy(update=...)``, field constraints and model
        validators run again, so an update cannot break an invariant.
        """
        return self.model_validate({**self.model_dump(), **changes})
