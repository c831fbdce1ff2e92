"""Models for sync committee duties."""

from pydantic import BaseModel


class SyncDuties(BaseModel):
    """Validators with sync committee duties at a slot."""

    slot: int
    validators: list[str]
