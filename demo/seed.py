#!/usr/bin/env python3
"""
Demo seed script — populates a running API with sample users and courses.

!! NOT FOR PRODUCTION !!
This script creates users with known passwords. It is intended ONLY for
local demos and frontend development. Everything goes through the public
HTTP API, so it also works as a quick end-to-end smoke test.

Usage:
    # With the API server running on localhost:5000:
    python demo/seed.py

    # Delete the database file (restart the server to recreate tables):
    python demo/seed.py --reset

    # Custom server URL:
    python demo/seed.py --base-url http://localhost:9000

Login credentials after seeding:
    ┌──────────────────────────────┬───────────────────┐
    │ Email                        │ Password          │
    ├──────────────────────────────┼───────────────────┤
    │ joe@smith.com                │ joepassword       │
    │ sally@jones.com              │ sallypassword     │
    └──────────────────────────────┴───────────────────┘
"""

import argparse
import asyncio
import os
import sys

import httpx

BASE_URL = "http://localhost:5000"

# ---------------------------------------------------------------------------
# Demo data
# ---------------------------------------------------------------------------

USERS = [
    {
        "firstName": "Joe",
        "lastName": "Smith",
        "emailAddress": "joe@smith.com",
        "password": "joepassword",
        "courses": [
            {
                "title": "Build a Basic Bookcase",
                "description": "High-end furniture projects are great to dream about. "
                               "But unless you have a well-equipped shop and some serious "
                               "woodworking experience to draw on, it can be difficult to "
                               "turn the dream into a reality.",
                "estimatedTime": "12 hours",
                "materialsNeeded": "* 1/2 x 3/4 inch parting strip\n"
                                   "* 1 x 2 common pine\n"
                                   "* Wood screws\n"
                                   "* Wood glue",
            },
            {
                "title": "Learn How to Program",
                "description": "In this course, you'll learn how to write code like a pro!",
                "estimatedTime": "6 hours",
                "materialsNeeded": "* Notebook computer running Mac OS X or Windows\n"
                                   "* Text editor",
            },
        ],
    },
    {
        "firstName": "Sally",
        "lastName": "Jones",
        "emailAddress": "sally@jones.com",
        "password": "sallypassword",
        "courses": [
            {
                "title": "Learn How to Test Programs",
                "description": "In this course, you'll learn how to test programs.",
            },
        ],
    },
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def log(msg: str) -> None:
    print(f"  {msg}")


async def create_user(client: httpx.AsyncClient, user: dict) -> None:
    """Create a user; a 400 for an already-registered email is not fatal."""
    body = {k: v for k, v in user.items() if k != "courses"}
    resp = await client.post(f"{BASE_URL}/api/users", json=body)
    if resp.status_code == 400:
        log(f"Skipped: {', '.join(resp.json()['errors'])}")
        return
    resp.raise_for_status()


async def create_course(client: httpx.AsyncClient, user: dict, course: dict) -> str:
    """Create a course as `user` and return its Location."""
    resp = await client.post(
        f"{BASE_URL}/api/courses",
        json=course,
        auth=(user["emailAddress"], user["password"]),
    )
    resp.raise_for_status()
    return resp.headers["Location"]


# ---------------------------------------------------------------------------
# Seed logic
# ---------------------------------------------------------------------------

async def seed(base_url: str) -> None:
    global BASE_URL
    BASE_URL = base_url

    print("\n========================================")
    print("  DEMO SEED — NOT FOR PRODUCTION")
    print("========================================\n")

    async with httpx.AsyncClient(timeout=30.0) as client:
        # Health check
        try:
            health = await client.get(f"{BASE_URL}/health")
            health.raise_for_status()
        except (httpx.ConnectError, httpx.HTTPStatusError):
            print(f"  ERROR: Cannot connect to {BASE_URL}")
            print("  Start the server first: uvicorn app.main:app --port 5000 --reload\n")
            sys.exit(1)

        for user in USERS:
            print(f"\nCreating {user['firstName']} {user['lastName']}...")
            await create_user(client, user)
            log(f"Login: {user['emailAddress']} / {user['password']}")

            for course in user["courses"]:
                location = await create_course(client, user, course)
                log(f"Course: {course['title']} -> {location}")

        courses = (await client.get(f"{BASE_URL}/api/courses")).json()

    # --- Summary ---
    print("\n========================================")
    print(f"  SEED COMPLETE — {len(courses)} courses")
    print("========================================")
    print(f"\n  {'Email':<30s} {'Password'}")
    print(f"  {'─' * 30} {'─' * 20}")
    for user in USERS:
        print(f"  {user['emailAddress']:<30s} {user['password']}")
    print()


def reset_database() -> None:
    """Delete the SQLite database file so the server recreates it on restart."""
    db_path = os.path.join(os.path.dirname(__file__), "..", "fsjstd-restapi.db")
    db_path = os.path.normpath(db_path)

    if os.path.exists(db_path):
        os.remove(db_path)
        print(f"\n  Deleted {db_path}")
        print("  Restart the server to recreate empty tables.\n")
    else:
        print(f"\n  No database found at {db_path}\n")


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Demo seed script — NOT FOR PRODUCTION",
        epilog="Creates sample users and courses for demos.",
    )
    parser.add_argument(
        "--base-url", default="http://localhost:5000",
        help="Base URL of the running API (default: http://localhost:5000)",
    )
    parser.add_argument(
        "--reset", action="store_true",
        help="Delete the database file and exit (restart server to recreate)",
    )
    args = parser.parse_args()

    if args.reset:
        reset_database()
        return

    await seed(args.base_url)


if __name__ == "__main__":
    asyncio.run(main())
