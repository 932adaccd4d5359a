"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, String
from protean.utils.globals import current_domain

from marketplace.domain import logger, marketplace
from marketplace.user.user import User
from marketplace.utils.security import hash_password


@marketplace.command(part_of="User")
class RegisterUser:
    """Create a new account. The password arrives in clear text and is hashed by the handler."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)
    role: String(max_length=10)
    phone_number: String(max_length=20)
    location: String(max_length=255)
    latitude: Float()
    longitude: Float()


@marketplace.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email already taken"]})

        user = User.register(
            name=command.name,
            email=command.email,
            password_hash=hash_password(command.password),
            role=command.role,
            phone_number=command.phone_number,
            location=command.location,
            latitude=command.latitude,
            longitude=command.longitude,
        )
        repo.add(user)
        logger.info("user_registered", user_id=str(user.id), role=user.role)
        return str(user.id)
