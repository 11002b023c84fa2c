from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class Record(BaseModel):
    """A single todo entry.

    Field names match the persisted JSON objects, so data written by earlier
    sessions keeps loading.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictStr = Field(min_length=1)
    name: StrictStr = Field(min_length=1)
    age: StrictStr = Field(min_length=1)
    completed: StrictBool = False

    def toggled(self) -> "Record":
        """Return a copy with ``completed`` flipped."""
        return self.model_copy(update={"completed": not self.completed})
