"""User preferences: command and handler."""

import json

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.user.user import User


@marketplace.command(part_of="User")
class AddUserPreferences:
    user_id: Identifier(required=True)
    user_preferences: Text(required=True)  # JSON array of product names


@marketplace.command_handler(part_of=User)
class UserPreferencesHandler:
    @handle(AddUserPreferences)
    def add_preferences(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.update_preferences(json.loads(command.user_preferences))
        repo.add(user)
        return user.preferences
