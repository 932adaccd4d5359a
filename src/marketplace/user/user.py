"""User aggregate with the GeoCoordinates value object sellers are pinned by."""

import json
import re
from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String, Text, ValueObject

from marketplace.domain import marketplace

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserRole(Enum):
    """Enumeration of account roles."""

    USER = "user"
    SELLER = "seller"
    ADMIN = "Admin"


@marketplace.value_object(part_of="User")
class GeoCoordinates:
    """Latitude/longitude pair where a seller's shop is located.

    Both coordinates are required when provided; partial coordinates are rejected.
    """

    latitude: Float(min_value=-90.0, max_value=90.0)
    longitude: Float(min_value=-180.0, max_value=180.0)

    @invariant.post
    def both_coordinates_required(self):
        if self.latitude is None or self.longitude is None:
            raise ValidationError({"coordinates": ["Both latitude and longitude are required"]})


@marketplace.aggregate
class User:
    """A buyer, seller or administrator of the marketplace.

    Sellers carry coordinates so their listings can be placed on the map.
    Preferences are product names the user wants to see offers for, stored
    as a JSON array.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    role: String(choices=UserRole, default=UserRole.USER.value)
    phone_number: String(max_length=20)
    location: String(max_length=255)
    coordinates: ValueObject(GeoCoordinates)
    user_preferences: Text()
    registered_at: DateTime(default=datetime.now)

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email and not _EMAIL_PATTERN.match(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @classmethod
    def register(
        cls,
        name,
        email,
        password_hash,
        role=None,
        phone_number=None,
        location=None,
        latitude=None,
        longitude=None,
    ):
        from marketplace.user.events import UserRegistered

        coordinates = None
        if latitude is not None or longitude is not None:
            coordinates = GeoCoordinates(latitude=latitude, longitude=longitude)

        now = datetime.now()
        user = cls(
            name=name,
            email=email.strip().lower(),
            password_hash=password_hash,
            role=role or UserRole.USER.value,
            phone_number=phone_number,
            location=location,
            coordinates=coordinates,
            user_preferences=json.dumps([]),
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                email=user.email,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    @property
    def preferences(self) -> list[str]:
        if not self.user_preferences:
            return []
        return json.loads(self.user_preferences)

    @property
    def is_seller(self) -> bool:
        return self.role == UserRole.SELLER.value

    def update_preferences(self, preferences):
        from marketplace.user.events import UserPreferencesUpdated

        if not isinstance(preferences, list) or not all(isinstance(p, str) for p in preferences):
            raise ValidationError({"userPreferences": ["Invalid preferences format"]})

        self.user_preferences = json.dumps(preferences)
        self.raise_(
            UserPreferencesUpdated(
                user_id=self.id,
                preferences=self.user_preferences,
            )
        )

    def to_public_dict(self) -> dict:
        """Account details safe to hand back to clients (no password hash)."""
        return {
            "_id": str(self.id),
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "phoneNumber": self.phone_number,
            "location": self.location,
            "coords": self.coords,
            "userPreferences": self.preferences,
        }

    @property
    def coords(self) -> dict | None:
        if self.coordinates is None:
            return None
        return {"lat": self.coordinates.latitude, "lng": self.coordinates.longitude}
