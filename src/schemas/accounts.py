from pydantic import BaseModel, ConfigDict, field_validator

from database.validators.accounts import (
    validate_username,
    validate_password_present
)

from .examples.accounts import (
    credentials_request_schema_example,
    signup_response_schema_example,
    login_response_schema_example,
    token_refresh_response_schema_example,
    logout_response_schema_example
)


class CredentialsRequestSchema(BaseModel):
    username: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": credentials_request_schema_example
        }
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return validate_username(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return validate_password_present(value)


class SignupRequestSchema(CredentialsRequestSchema):
    pass


class LoginRequestSchema(CredentialsRequestSchema):
    pass


class MessageResponseSchema(BaseModel):
    message: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": signup_response_schema_example
        }
    )


class LogoutResponseSchema(MessageResponseSchema):
    model_config = ConfigDict(
        json_schema_extra={
            "example": logout_response_schema_example
        }
    )


class LoginResponseSchema(BaseModel):
    message: str
    jwt: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": login_response_schema_example
        }
    )


class TokenRefreshResponseSchema(BaseModel):
    token: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": token_refresh_response_schema_example
        }
    )
