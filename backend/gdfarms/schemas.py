from typing import Any, Dict, List, Optional
from datetime import datetime, date
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# --- User ---
class UserInitRequest(BaseModel):
    user_id: Optional[str] = Field(None, validation_alias=AliasChoices("userId", "user_id"))


class UserInitResult(BaseModel):
    user_id: str
    created: bool


# --- Item ---
class ItemFields(BaseModel):
    """Writable item columns. Accepts the legacy cost/price names."""

    category: Optional[str] = None
    unit: Optional[str] = None
    quantity: Optional[float] = None
    buying_price: Optional[float] = Field(
        None, validation_alias=AliasChoices("buying_price", "buyingPrice", "cost")
    )
    selling_price: Optional[float] = Field(
        None, validation_alias=AliasChoices("selling_price", "sellingPrice", "price")
    )
    description: Optional[str] = None


class ItemCreate(ItemFields):
    user_id: str = Field(..., validation_alias=AliasChoices("userId", "user_id"))
    name: str


class ItemUpdate(ItemFields):
    user_id: str = Field(..., validation_alias=AliasChoices("userId", "user_id"))
    name: Optional[str] = None


class ItemResponse(BaseModel):
    id: int
    user_id: str
    name: str
    category: Optional[str] = None
    unit: Optional[str] = None
    quantity: Optional[float] = None
    buying_price: Optional[float] = None
    selling_price: Optional[float] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# --- Analytics ---
class TopItem(BaseModel):
    id: int
    name: str
    quantity: float
    buying_price: float
    selling_price: float
    profit: float

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyticsResponse(BaseModel):
    total_investment: float
    total_revenue: float
    total_profit: float
    profit_margin: float
    total_item_count: int
    top_items: List[TopItem] = []

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Settings ---
class SettingsUpdate(BaseModel):
    currency: str
    app_name: str = Field(..., validation_alias=AliasChoices("app_name", "appName"))
    unit_preferences: Dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("unit_preferences", "unitPreferences"),
    )


class SettingsResponse(BaseModel):
    user_id: str
    currency: str
    app_name: str
    unit_preferences: Dict[str, Any] = {}
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# --- Goal ---
class GoalCreate(BaseModel):
    user_id: str = Field(..., validation_alias=AliasChoices("userId", "user_id"))
    name: Optional[str] = None
    target_revenue: Optional[float] = Field(
        None, validation_alias=AliasChoices("target_revenue", "targetRevenue")
    )
    target_profit: Optional[float] = Field(
        None, validation_alias=AliasChoices("target_profit", "targetProfit")
    )
    target_items: Optional[int] = Field(
        None,
        validation_alias=AliasChoices(
            "target_items", "targetItems", "target_item_count", "targetItemCount"
        ),
    )
    deadline: Optional[date] = None
    description: Optional[str] = None


class GoalResponse(BaseModel):
    id: int
    user_id: str
    name: Optional[str] = None
    target_revenue: Optional[float] = None
    target_profit: Optional[float] = None
    target_items: Optional[int] = None
    deadline: Optional[date] = None
    description: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
