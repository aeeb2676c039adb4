#!/usr/bin/env python3
"""
Create or update a user account.

Usage:
    python scripts/create_user.py alice --password secret --admin
    python scripts/create_user.py bob --password secret --moderator
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from mailtext.core.database import SessionLocal, engine, Base
from mailtext.core.security import get_password_hash
from mailtext.models.user import User


def create_user(username: str, password: str, email: str | None, admin: bool, moderator: bool, locale: str | None):
    """Create the user, or reset password and roles if it exists"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    
    try:
        user = db.query(User).filter(User.username == username).first()
        created = user is None
        if created:
            user = User(username=username)
            db.add(user)
        
        user.password_hash = get_password_hash(password)
        user.email = email or user.email
        user.admin = admin
        user.moderator = moderator
        user.locale = locale or user.locale
        user.active = True
        db.commit()
        
        roles = [name for name, flag in (("admin", admin), ("moderator", moderator)) if flag]
        action = "Created" if created else "Updated"
        print(f"{action} user '{username}' ({', '.join(roles) or 'regular'})")
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Create a Mailtext Admin user")
    parser.add_argument("username")
    parser.add_argument("--password", required=True)
    parser.add_argument("--email")
    parser.add_argument("--locale")
    parser.add_argument("--admin", action="store_true")
    parser.add_argument("--moderator", action="store_true")
    args = parser.parse_args()
    
    create_user(args.username, args.password, args.email, args.admin, args.moderator, args.locale)


if __name__ == "__main__":
    main()
