"""
Filter criteria for transaction list views.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

ALL = "ALL"

MonthFilter = Literal[
    "ALL", "01", "02", "03", "04", "05", "06", "07", "08", "09", "10", "11", "12"
]
TypeFilter = Literal["ALL", "INCOME", "EXPENSE"]


class TransactionFilter(BaseModel):
    """The four recognised filter fields. Defaults select everything."""

    model_config = ConfigDict(frozen=True)

    month: MonthFilter = ALL
    type: TypeFilter = ALL
    category: str = ALL
    search: str = ""

    @field_validator("month", mode="before")
    @classmethod
    def normalize_month(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if value.upper() == ALL:
                return ALL
            if value.isdigit() and len(value) == 1:
                return value.zfill(2)
        return value

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def is_empty(self) -> bool:
        return (
            self.month == ALL
            and self.type == ALL
            and self.category == ALL
            and not self.search
        )
