"""
Authentication Form Schemas

Pydantic models over the raw field-name-keyed form submissions.
Field names follow the form (camelCase) through aliases, so validation
errors come back keyed the way the client sent them.
"""

from typing import Annotated, Any, Dict, List, Mapping, Type, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, ValidationError
from pydantic_core import PydanticCustomError

from src.domain.result import Error, Result, Return

PASSWORD_MIN_LENGTH = 8
# bcrypt rejects longer inputs
PASSWORD_MAX_BYTES = 72

FormT = TypeVar("FormT", bound=BaseModel)


def _check_password_length(value: str) -> str:
    if len(value) < PASSWORD_MIN_LENGTH:
        raise PydanticCustomError(
            "password_too_short",
            "Password must be at least {min_length} characters",
            {"min_length": PASSWORD_MIN_LENGTH},
        )
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise PydanticCustomError(
            "password_too_long",
            "Password must be at most {max_bytes} bytes",
            {"max_bytes": PASSWORD_MAX_BYTES},
        )
    return value


Password = Annotated[str, AfterValidator(_check_password_length)]


class FormModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class LoginForm(FormModel):
    email: EmailStr
    password: Password


class RegisterForm(FormModel):
    email: EmailStr
    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)
    password: Password
    confirm_password: Password = Field(alias="confirmPassword")


class ResetEmailForm(FormModel):
    email: EmailStr


class ResetCodeForm(FormModel):
    code: str = Field(min_length=1)


class NewPasswordForm(FormModel):
    password: Password
    confirm_password: Password = Field(alias="confirmPassword")


def parse_form(schema: Type[FormT], data: Mapping[str, Any]) -> Result[FormT]:
    """
    Validate a form submission.

    Args:
        schema: Form model to validate against
        data: Raw submitted fields

    Returns:
        Result with the parsed form, or Error(VALIDATION_ERROR) whose fields
        map each offending form field to its messages
    """
    try:
        return Return.ok(schema.model_validate(dict(data)))
    except ValidationError as exc:
        fields: Dict[str, List[str]] = {}
        for err in exc.errors():
            name = str(err["loc"][0]) if err["loc"] else "__root__"
            fields.setdefault(name, []).append(err["msg"])
        return Return.err(Error("VALIDATION_ERROR", "Invalid form submission", fields))
