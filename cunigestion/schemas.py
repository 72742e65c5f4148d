from __future__ import annotations

import datetime as dt
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional, List, Dict

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

# Days from mating to expected kindling
GESTATION_DAYS = 31


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class RabbitStatus(str, Enum):
    YOUNG = "young"
    WEANED = "weaned"
    READY_FOR_SALE = "ready_for_sale"
    BREEDER = "breeder"
    SICK = "sick"
    SOLD = "sold"


# Never overwritten by automatic derivation
TERMINAL_STATUSES = frozenset({RabbitStatus.SICK, RabbitStatus.SOLD})


class StockType(str, Enum):
    FEED = "feed"
    MEDICINE = "medicine"
    EQUIPMENT = "equipment"


class FinanceKind(str, Enum):
    SALE = "sale"
    PURCHASE = "purchase"


class HealthEventType(str, Enum):
    ILLNESS = "illness"
    VACCINATION = "vaccination"
    TREATMENT = "treatment"


class Period(str, Enum):
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"
    THIS_YEAR = "this_year"


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class FiniteModel(BaseModel):
    # Infinity/NaN would be written to the collection JSON as non-standard tokens
    model_config = ConfigDict(allow_inf_nan=False)


# -----------------------------
# Rabbits
# -----------------------------

class RabbitCreate(FiniteModel):
    name: str = Field(min_length=1)
    sex: Sex
    breed: str = Field(min_length=1)
    birth_date: date
    current_weight: float = Field(default=0, ge=0)
    # Only sick/sold survive derivation, anything else is recomputed
    status: Optional[RabbitStatus] = None
    mother_id: Optional[int] = None
    father_id: Optional[int] = None


class RabbitUpdate(FiniteModel):
    name: Optional[str] = Field(default=None, min_length=1)
    sex: Optional[Sex] = None
    breed: Optional[str] = Field(default=None, min_length=1)
    birth_date: Optional[date] = None
    current_weight: Optional[float] = Field(default=None, ge=0)
    status: Optional[RabbitStatus] = None
    mother_id: Optional[int] = None
    father_id: Optional[int] = None


class Rabbit(FiniteModel):
    id: int
    name: str
    sex: Sex
    breed: str = ""
    birth_date: Optional[date] = None
    current_weight: float = Field(default=0, ge=0)
    status: RabbitStatus = RabbitStatus.YOUNG
    mother_id: Optional[int] = None
    father_id: Optional[int] = None
    created_at: datetime


class Lineage(FiniteModel):
    rabbit: Rabbit
    mother: Optional[Rabbit] = None
    father: Optional[Rabbit] = None
    offspring: List[Rabbit] = []


# -----------------------------
# Stocks
# -----------------------------

class StockCreate(FiniteModel):
    name: str = Field(min_length=1)
    type: StockType = StockType.FEED
    quantity: float = 0
    unit: str = Field(min_length=1)
    alert_threshold: float = 0
    unit_price: float = Field(default=0, ge=0)
    supplier: str = ""


class StockUpdate(FiniteModel):
    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[StockType] = None
    quantity: Optional[float] = None
    unit: Optional[str] = Field(default=None, min_length=1)
    alert_threshold: Optional[float] = None
    unit_price: Optional[float] = Field(default=None, ge=0)
    supplier: Optional[str] = None


class StockItem(FiniteModel):
    id: int
    name: str
    type: StockType
    quantity: float
    unit: str
    alert_threshold: float = 0
    unit_price: float = Field(default=0, ge=0)
    supplier: str = ""
    created_at: datetime

    def is_low(self) -> bool:
        return self.quantity <= self.alert_threshold


class StockOut(StockItem):
    @computed_field
    @property
    def low_stock(self) -> bool:
        return self.is_low()


# -----------------------------
# Finances
# -----------------------------

class FinanceCreate(FiniteModel):
    kind: FinanceKind
    amount: float = Field(gt=0)
    description: str
    date: date
    category: str = Field(min_length=1)

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v):
        return _not_blank(v)


class FinanceUpdate(FiniteModel):
    kind: Optional[FinanceKind] = None
    amount: Optional[float] = Field(default=None, gt=0)
    description: Optional[str] = None
    date: Optional[dt.date] = None
    category: Optional[str] = Field(default=None, min_length=1)

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v):
        return None if v is None else _not_blank(v)


class FinanceTransaction(FiniteModel):
    id: int
    kind: FinanceKind
    amount: float = Field(gt=0)
    description: str
    date: date
    category: str = ""
    created_at: datetime

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v):
        return _not_blank(v)


class FinanceTotals(FiniteModel):
    sales: float
    purchases: float
    balance: float


# -----------------------------
# Reproduction & health events
# -----------------------------

class ReproductionCreate(FiniteModel):
    mother_id: int
    father_id: int
    mating_date: date
    expected_kindling_date: Optional[date] = None
    actual_kindling_date: Optional[date] = None
    litter_size: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def default_expected_kindling(self):
        if self.expected_kindling_date is None:
            self.expected_kindling_date = self.mating_date + timedelta(days=GESTATION_DAYS)
        return self


class ReproductionUpdate(FiniteModel):
    expected_kindling_date: Optional[date] = None
    actual_kindling_date: Optional[date] = None
    litter_size: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None


class Reproduction(ReproductionCreate):
    id: int
    created_at: datetime


class HealthEventCreate(FiniteModel):
    rabbit_id: int
    type: HealthEventType
    description: str = Field(min_length=1)
    start_date: date
    end_date: Optional[date] = None
    medication: Optional[str] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def validate_dates(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class HealthEventUpdate(FiniteModel):
    end_date: Optional[date] = None
    medication: Optional[str] = None
    notes: Optional[str] = None


class HealthEvent(HealthEventCreate):
    id: int
    created_at: datetime


# -----------------------------
# Dashboard & reports
# -----------------------------

class KPIs(FiniteModel):
    total_rabbits: int
    ready_for_sale_count: int
    breeder_count: int
    monthly_revenue: float
    monthly_expenses: float
    monthly_profit: float
    low_stock_count: int


class CategoryTotal(FiniteModel):
    category: str
    amount: float


class Report(FiniteModel):
    period: Period
    start: datetime
    end: datetime
    total_rabbits: int
    status_counts: Dict[RabbitStatus, int]
    revenue: float
    expenses: float
    profit: float
    stock_items: int
    stock_value: float
    low_stock_count: int
    top_expense_categories: List[CategoryTotal]
    rabbits: List[Rabbit]
    finances: List[FinanceTransaction]
    stocks: List[StockItem]


class LanguagePreference(FiniteModel):
    language: str = Field(pattern=r"^(fr|en)$")
