from pydantic import BaseModel


class ImmutableModel(BaseModel):
    """Base class for records that must not change once handed out"""

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }
