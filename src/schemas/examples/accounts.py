from typing import Dict, Any

credentials_request_schema_example: Dict[str, Any] = {
    "username": "john.doe",
    "password": "SecurePassword123!"
}

signup_response_schema_example: Dict[str, Any] = {
    "message": "User registered successfully"
}

login_response_schema_example: Dict[str, Any] = {
    "message": "Authenticated",
    "jwt": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.eyJ1c2VybmFtZSI6ImpvaG4uZG9lIiwi"
           "ZXhwIjoxNzM2OTQwNjAwfQ.2Jt8mP5bQ0pJ7yWv1l0oJc1x4ZrS9v6nA3hQ8eK7fUs"
}

token_refresh_response_schema_example: Dict[str, Any] = {
    "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.eyJ1c2VybmFtZSI6ImpvaG4uZG9lIiwi"
             "ZXhwIjoxNzM2OTQxNTAwfQ.Xq0vG3k8bN2mT5rY7wP1sD4fH6jK9lZ0cV2bN4mQ8aE"
}

logout_response_schema_example: Dict[str, Any] = {
    "message": "Logged out"
}
