"""Create a user in the database.

Usage:
    python -m scripts.create_user --name Asha --email asha@test.com --age 34
"""

import argparse
import asyncio

from healthchecker.core.database import Base, async_session_factory, engine
from healthchecker.models import chat_message, health_report  # noqa: F401
from healthchecker.repositories.user_repo import UserRepository


async def create_user(name: str, email: str, age: int | None) -> None:
    """Create a user if the email is not registered yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        repo = UserRepository(session)
        existing = await repo.find_by_email(email)
        if existing:
            print(f"User with email '{email}' already exists (id={existing.id}).")
            return

        user = await repo.create(name=name, email=email.lower().strip(), age=age)
        await session.commit()
        print(f"User created: {email} (id={user.id})")

    await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a user")
    parser.add_argument("--name", required=True, help="Display name")
    parser.add_argument("--email", required=True, help="User email")
    parser.add_argument("--age", type=int, default=None, help="Age in years")
    args = parser.parse_args()

    asyncio.run(create_user(args.name, args.email, args.age))


if __name__ == "__main__":
    main()
