from datetime import date
from typing import Any, Union

from pydantic import BaseModel, Field, model_validator


def _today() -> date:
    return date.today()


class AvailabilityRequest(BaseModel):
    # Values are relayed as sent, neither ranges nor formats are checked
    route: Union[str, int, float] = "7"
    year: Union[int, str] = Field(default_factory=lambda: _today().year)
    month: Union[int, str] = Field(default_factory=lambda: _today().month)

    @model_validator(mode="before")
    @classmethod
    def null_means_default(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
