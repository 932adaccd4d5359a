"""Client-side form validation. A rejected form never reaches the network."""

import re
from datetime import date
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, Field, ValidationError, field_validator, model_validator

from storefront.errors import FormValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[\d\s()-]+$")
PHONE_MIN_LENGTH = 10


def _check_email(value: str) -> str:
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email address")
    return value.lower()


Email = Annotated[str, AfterValidator(_check_email)]


def _check_password(value: str) -> str:
    if not (re.search(r"[A-Z]", value) and re.search(r"[a-z]", value) and re.search(r"\d", value)):
        raise ValueError("Password must contain an uppercase letter, a lowercase letter and a digit")
    return value


Password = Annotated[str, Field(min_length=8), AfterValidator(_check_password)]


class LoginForm(BaseModel):
    email: Email
    password: Password


class RegistrationForm(BaseModel):
    name: str | None = Field(None, max_length=100)
    email: Email
    role: Literal["user", "seller"] = "user"
    phone_number: str
    location: str = Field(min_length=3)
    password: Password
    confirm_password: str
    lat: float | None = None
    lng: float | None = None

    @field_validator("phone_number")
    @classmethod
    def _phone(cls, value: str) -> str:
        value = value.strip()
        if not PHONE_PATTERN.match(value):
            raise ValueError("Invalid phone number")
        if len(value) < PHONE_MIN_LENGTH:
            raise ValueError(f"Phone number must be at least {PHONE_MIN_LENGTH} digits")
        return value

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self

    def to_payload(self) -> dict:
        payload = {
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "role": self.role,
            "phoneNumber": self.phone_number,
            "location": self.location,
        }
        if self.lat is not None and self.lng is not None:
            payload.update(lat=self.lat, lng=self.lng)
        return payload


class ProductForm(BaseModel):
    name: str = Field(min_length=3, max_length=100)
    description: str = Field(min_length=10, max_length=500)
    category: str = Field(min_length=1)
    original_price: float = Field(ge=0)
    discounted_price: float = Field(ge=0)
    discount_percentage: float | None = Field(None, ge=0, le=100)
    expiry_date: date
    available_quantity: int = Field(ge=1)
    status: Literal["active", "sold-out", "expired", "draft", "unavailable"] = "active"
    image_name: str | None = None

    @field_validator("expiry_date")
    @classmethod
    def _in_future(cls, value: date) -> date:
        if value <= date.today():
            raise ValueError("Expiry date must be in the future")
        return value

    @model_validator(mode="after")
    def _discount_not_above_original(self):
        if self.discounted_price > self.original_price:
            raise ValueError("Discounted price must be less than or equal to the original price")
        return self

    @property
    def effective_discount_percentage(self) -> float:
        if self.discount_percentage is not None:
            return self.discount_percentage
        if not self.original_price:
            return 0.0
        return round((self.original_price - self.discounted_price) / self.original_price * 100, 2)

    def to_payload(self, seller_id: str) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "sellerId": seller_id,
            "originalPrice": self.original_price,
            "discountedPrice": self.discounted_price,
            "discountPercentage": self.effective_discount_percentage,
            "expiryDate": self.expiry_date.isoformat(),
            "availableQuantity": self.available_quantity,
            "status": self.status,
            "imageName": self.image_name,
        }


def validate_form(form_cls: type[BaseModel], data: dict):
    """Build ``form_cls`` from ``data`` or raise ``FormValidationError`` keyed by field."""
    try:
        return form_cls.model_validate(data)
    except ValidationError as exc:
        errors: dict[str, list[str]] = {}
        for err in exc.errors():
            field = ".".join(str(p) for p in err["loc"]) or "__all__"
            message = err["msg"].removeprefix("Value error, ")
            errors.setdefault(field, []).append(message)
        raise FormValidationError(errors) from exc
