"""
Seed script for the user_gamification collection.
Run: python -m scripts.seed_gamification <user_id> [<user_id> ...]

Stores the template profile for each user id so the "mongo" profile
backend has something to serve.
"""

import asyncio
import os
import sys
from motor.motor_asyncio import AsyncIOMotorClient
from dotenv import load_dotenv

from gamedash.gamification.models import GamificationProfile
from gamedash.gamification.service import PROFILE_TEMPLATE

load_dotenv()

MONGO_URL = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("MONGO_DB_NAME", "gamedash")
COLLECTION = os.getenv("GAMIFICATION_COLLECTION", "user_gamification")


async def seed_gamification(user_ids):
    """Upsert one template profile per user id."""
    client = AsyncIOMotorClient(MONGO_URL)
    try:
        collection = client[DB_NAME][COLLECTION]
        print(f"Connected to MongoDB: {MONGO_URL}/{DB_NAME}")

        await collection.create_index("userId", unique=True)

        for user_id in user_ids:
            profile = GamificationProfile(**{**PROFILE_TEMPLATE, "user_id": user_id})
            document = profile.model_dump(by_alias=True)
            result = await collection.replace_one({"userId": user_id}, document, upsert=True)
            action = "Inserted" if result.upserted_id else "Updated"
            print(f"  {action} profile for {user_id}: {profile.total_points} pts, {len(profile.badges)} badges")
    finally:
        client.close()

    print("\n✅ Seed complete!")


if __name__ == "__main__":
    ids = sys.argv[1:] or ["user123"]
    asyncio.run(seed_gamification(ids))
