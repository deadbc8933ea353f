"""Shared validation for user credentials."""

from pulse.domain.entities import USER_ROLES

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def normalize_username(username: str) -> str:
    value = username.strip().lower()
    if len(value) < MIN_USERNAME_LENGTH:
        msg = (
            "Le nom d'utilisateur doit contenir au moins "
            f"{MIN_USERNAME_LENGTH} caractères"
        )
        raise ValueError(msg)
    return value


def normalize_email(email: str) -> str:
    value = email.strip().lower()
    if "@" not in value:
        raise ValueError("Format d'email invalide")
    return value


def validate_password(password: str) -> str:
    if len(password) < MIN_PASSWORD_LENGTH:
        msg = f"Le mot de passe doit contenir au moins {MIN_PASSWORD_LENGTH} caractères"
        raise ValueError(msg)
    return password


def normalize_role(role: str) -> str:
    value = role.strip().upper()
    if value not in USER_ROLES:
        raise ValueError("Rôle invalide")
    return value
