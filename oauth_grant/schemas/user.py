"""User schemas"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Resource owner whose credentials were verified by the user directory"""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., min_length=1)
