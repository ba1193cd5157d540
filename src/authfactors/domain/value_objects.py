"""ABOUTME: Value objects and validation helpers for authfactors domain models
ABOUTME: Defines the email check shared by the User aggregate"""

from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator

from authfactors.exceptions import InvalidEmail


def validate_email(email: str) -> None:
    """Basic email validation."""
    # we use the well-tested and maintained Django EmailValidator
    # Note that passing in the message is important - if we don't do that then
    # the validator will try to use the default message, which will trigger the
    # auto localisation of the string which then blows up without configured settings.
    validator = EmailValidator(message="Invalid email address")
    try:
        validator(email)
    except ValidationError as error:
        raise InvalidEmail(email) from error

