from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum
from datetime import datetime
from decimal import Decimal


class Category(str, Enum):
    FOOD = "food"
    TRAVEL = "travel"
    BILLS = "bills"
    ENTERTAINMENT = "entertainment"
    OTHER = "other"


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(gt=0, decimal_places=2)
    category: Category
    timestamp: datetime = Field(default_factory=datetime.now)

    @field_validator("category", mode="before")
    @classmethod
    def _normalise_category(cls, value):
        # accept "Food", " TRAVEL " etc. from user input
        if isinstance(value, str):
            return value.strip().lower()
        return value
