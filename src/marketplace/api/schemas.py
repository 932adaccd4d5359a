"""Pydantic request/response schemas for the Marketplace API.

The wire format is camelCase; fields are declared in snake_case and aliased.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}

# --- Request Schemas ---


class RegisterRequest(BaseModel):
    model_config = {
        **_CAMEL,
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Sita Bakery",
                    "email": "sita@example.com",
                    "password": "Secret123",
                    "role": "seller",
                    "phoneNumber": "+977 9800000000",
                    "location": "Kathmandu",
                    "lat": 27.7172,
                    "lng": 85.324,
                }
            ]
        },
    }

    name: str | None = Field(None, max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=1, max_length=128)
    role: str | None = Field(None, max_length=10)
    phone_number: str | None = Field(None, max_length=20)
    location: str | None = Field(None, max_length=255)
    lat: float | None = None
    lng: float | None = None


class LoginRequest(BaseModel):
    model_config = {
        **_CAMEL,
        "json_schema_extra": {"examples": [{"email": "sita@example.com", "password": "Secret123"}]},
    }

    email: str | None = None
    password: str | None = None


class UpdatePreferencesRequest(BaseModel):
    model_config = {
        **_CAMEL,
        "json_schema_extra": {"examples": [{"userPreferences": ["Pizza", "Momo"]}]},
    }

    user_preferences: list[str] | None = None


class CreateCategoryRequest(BaseModel):
    model_config = {**_CAMEL, "json_schema_extra": {"examples": [{"name": "Pizza", "emoji": "🍕"}]}}

    name: str = Field(..., max_length=100)
    emoji: str | None = Field(None, max_length=16)


class CreateProductRequest(BaseModel):
    model_config = {
        **_CAMEL,
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Margherita",
                    "description": "Wood-fired, baked this morning",
                    "category": "cat-001",
                    "sellerId": "seller-001",
                    "originalPrice": 800,
                    "discountedPrice": 400,
                    "expiryDate": "2030-01-01",
                    "availableQuantity": 5,
                }
            ]
        },
    }

    name: str = Field(..., max_length=100)
    description: str | None = None
    category: str
    seller_id: str
    original_price: float = Field(..., ge=0)
    discounted_price: float = Field(..., ge=0)
    discount_percentage: float | None = Field(None, ge=0, le=100)
    expiry_date: date | None = None
    available_quantity: int = Field(..., ge=0)
    is_available: bool = True
    status: str | None = None
    image_name: str | None = None


class UpdateStockRequest(BaseModel):
    model_config = {**_CAMEL, "json_schema_extra": {"examples": [{"availableQuantity": 2}]}}

    available_quantity: int


class PlaceOrderRequest(BaseModel):
    model_config = {
        **_CAMEL,
        "json_schema_extra": {
            "examples": [
                {
                    "bookedById": "user-001",
                    "productId": "prod-001",
                    "quantity": 3,
                    "price": 300,
                    "paymentMethod": "Cash",
                }
            ]
        },
    }

    booked_by_id: str
    product_id: str
    quantity: int
    price: float = Field(..., ge=0)
    payment_method: str = "Cash"


# --- Response Schemas ---


class MessageResponse(BaseModel):
    model_config = _CAMEL

    message: str


class CreatedResponse(MessageResponse):
    model_config = {
        **_CAMEL,
        "json_schema_extra": {
            "examples": [{"message": "Product added successfully", "id": "b2c3d4e5-f6a7-8901-bcde-f12345678901"}]
        },
    }

    id: str


class RegisterResponse(MessageResponse):
    message: str = "User registered successfully"
    user_id: str


class OrderResponse(MessageResponse):
    message: str = "Order placed successfully"
    order_id: str


class LoginResponse(MessageResponse):
    message: str = "Logged in successfully"
    user: dict
    is_logged_in: bool = True
    token: str


class StockUpdateResponse(MessageResponse):
    message: str = "Product updated successfully"
    product: dict


class PreferencesResponse(MessageResponse):
    message: str = "User preferences updated successfully"
    user_preferences: list[str]
