#!/usr/bin/env python
# scripts/make_admin.py
import argparse
import getpass

from dotenv import load_dotenv

load_dotenv()

from rentalhub import create_app, db  # noqa: E402
from rentalhub.models import User  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Create or update an admin account.")
    parser.add_argument("email")
    parser.add_argument("--name", default="Administrator")
    parser.add_argument("--password", help="prompted for when omitted")
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")
    email = args.email.strip().lower()

    app = create_app()
    with app.app_context():
        u = User.query.filter_by(email=email).first()
        if not u:
            u = User(email=email, user_name=args.name)
            db.session.add(u)
        u.user_type = "admin"
        u.set_password(password)
        db.session.commit()
        print("Admin ensured:", u.id, email)


if __name__ == "__main__":
    main()
