"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import User
from shared.errors import ConflictError
from shared.settings import get_settings

# bcrypt only looks at the first 72 bytes of a password
_MAX_PASSWORD_BYTES = 72


@identity.command(part_of="User")
class RegisterUser:
    """Create a new account from an email and a password."""

    email: String(max_length=254)
    password: String(max_length=255)


def validate_registration(email, password):
    if not email or not password:
        raise ValidationError({"credentials": ["Email and password are required"]})

    min_length = get_settings().PASSWORD_MIN_LENGTH
    if len(password) < min_length:
        raise ValidationError({"password": [f"Password must be at least {min_length} characters"]})
    if len(password.encode("utf-8")) > _MAX_PASSWORD_BYTES:
        raise ValidationError({"password": [f"Password must be at most {_MAX_PASSWORD_BYTES} bytes"]})


@identity.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        validate_registration(command.email, command.password)

        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ConflictError("User already exists")

        user = User.register(email=command.email, password=command.password)
        repo.add(user)
        return str(user.id)
