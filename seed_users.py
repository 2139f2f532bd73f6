#!/usr/bin/env python
from src.db.session import LocalSession, engine
from src.db import Base
from src.db.models import Profile, UserRole
from src.app.services.tokens import issue_access_token


def get_or_create(db, email, **kwargs):
    obj = db.query(Profile).filter(Profile.email == email).first()
    if obj:
        return obj
    obj = Profile(email=email, **kwargs)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def main():
    Base.metadata.create_all(bind=engine)
    db = LocalSession()
    try:
        supervisor = get_or_create(db, "supervisor@example.com", full_name="Sofia Supervisora", role=UserRole.supervisor)
        operator = get_or_create(db, "operator@example.com", full_name="Otávio Operador", role=UserRole.operator)

        print("Seeded profiles:")
        for profile in (supervisor, operator):
            print(f"{profile.role.value:<10} {profile.user_id}")
            print(f"  token: {issue_access_token(profile.user_id, profile.role.value)}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
