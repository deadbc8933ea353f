"""Utility script to create the first administrator in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from pulse.application.use_cases.users import register_user
from pulse.domain.entities import ROLE_ADMIN
from pulse.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial administrator for the Pulse API.",
    )
    parser.add_argument(
        "--username",
        default="admin",
        help="Nom d'utilisateur (par défaut : admin)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Adresse e-mail de connexion (par défaut : admin@example.com)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Mot de passe. S'il est omis, il est demandé de manière interactive.",
    )
    return parser.parse_args()


def main() -> None:
    """Create an administrator using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Mot de passe de l'administrateur : ")
    if not password:
        raise SystemExit("Aucun mot de passe valide n'a été fourni.")

    initialize_database()

    session = SessionLocal()
    try:
        user = register_user(
            session,
            username=args.username,
            email=args.email,
            password=password,
            role=ROLE_ADMIN,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Impossible de créer l'utilisateur : {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Erreur lors de l'enregistrement en base : {exc}") from exc
    else:
        print(
            "Administrateur créé :\n"
            f"  ID: {user.id}\n"
            f"  Nom d'utilisateur: {user.username}\n"
            f"  Email: {user.email}\n"
            f"  Rôle: {user.role}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
