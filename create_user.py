"""
Script to create a login account (there is no public registration endpoint).

Run this script from the project root:
    python create_user.py admin admin@example.com 'S3cret!' --role admin
"""

import argparse
import sys

from sqlalchemy.exc import IntegrityError

from app.core.database import SessionLocal
from app.crud import user as user_crud
from app.models.user import UserRole


def create_user(username: str, email: str, password: str, role: UserRole) -> int:
    db = SessionLocal()
    try:
        user = user_crud.create(db, username=username, email=email, password=password, role=role)
        print(f"Created {user.role} account '{user.username}' (id: {user.id})")
        return 0
    except IntegrityError:
        db.rollback()
        print(f"Username '{username}' or email '{email}' is already taken", file=sys.stderr)
        return 1
    finally:
        db.close()


def main() -> int:
    parser = argparse.ArgumentParser(description="Create an Alumni API account")
    parser.add_argument("username")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("--role", choices=[r.value for r in UserRole], default=UserRole.USER.value)
    args = parser.parse_args()

    return create_user(args.username, args.email, args.password, UserRole(args.role))


if __name__ == "__main__":
    sys.exit(main())
