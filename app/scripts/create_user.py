"""
Create a user account (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user "Site Admin" admin@example.com your-secure-password admin
"""
import argparse
import sys

from app.core.database import session_scope
from app.core.errors import Conflict, ValidationError
from app.services.credentials import signup
from app.services.user_store import SqlAlchemyUserStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an account without going through the API.")
    parser.add_argument("name", help="Display name (2-255 chars)")
    parser.add_argument("email", help="Email address (unique)")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    args = parser.parse_args(argv)

    payload = {"name": args.name, "email": args.email, "password": args.password, "role": args.role}
    try:
        with session_scope() as db:
            user = signup(SqlAlchemyUserStore(db), payload)
    except ValidationError as e:
        for item in e.details or []:
            print(f"{item['field']}: {item['message']}", file=sys.stderr)
        return 1
    except Conflict:
        print(f"User '{args.email}' already exists.", file=sys.stderr)
        return 1
    print(f"Created user '{user.email}' (id={user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
