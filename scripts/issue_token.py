#!/usr/bin/env python3
import argparse
import sys
from datetime import timedelta

from sqlmodel import Session

from app.db.session import engine
from app.services.auth_service import create_access_token
from app.services.user_service import get_user_by_username


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Print an access token for an existing user')
    parser.add_argument('username')
    parser.add_argument('--minutes', type=int, default=None, help='token lifetime override')
    args = parser.parse_args(argv)

    with Session(engine) as session:
        user = get_user_by_username(session, args.username)
    if not user:
        print(f'user not found: {args.username}', file=sys.stderr)
        return 1

    expires = timedelta(minutes=args.minutes) if args.minutes else None
    print(create_access_token(user.id, expires))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
