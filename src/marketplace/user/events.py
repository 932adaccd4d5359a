"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from marketplace.domain import marketplace


@marketplace.event(part_of="User")
class UserRegistered:
    """A new account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)


@marketplace.event(part_of="User")
class UserPreferencesUpdated:
    """The user replaced the list of foods they want offers for."""

    __version__ = 1

    user_id: Identifier(required=True)
    preferences: Text()  # JSON array of product names
