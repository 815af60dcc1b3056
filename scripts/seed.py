"""Seed script — creates sample documents via the REST API and prints their access codes.

Usage:
    python scripts/seed.py              # uses http://localhost:8000
    python scripts/seed.py http://host  # custom base URL
"""

import sys

import httpx

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"

DOCUMENTS = [
    {
        "title": "Getting Started Guide",
        "content": "Share this link with anyone who needs the basics.",
    },
    {
        "title": "Meeting Notes",
        "content": "Agenda, decisions and action items from Monday.",
        "expiresIn": 3600,
    },
    {
        "title": "Temporary Wi-Fi Password",
        "content": "guest-network / correct-horse-battery-staple",
        "expiresIn": 300,
    },
]


def create_document(client: httpx.Client, document: dict) -> str:
    resp = client.post(f"{BASE_URL}/api/v1/documents", json=document)
    resp.raise_for_status()
    code = resp.json()["accessCode"]
    expiry = f"expires in {document['expiresIn']}s" if "expiresIn" in document else "never expires"
    print(f"  Created '{document['title']}' -> {code} ({expiry})")
    return code


def redeem(client: httpx.Client, code: str) -> None:
    resp = client.get(f"{BASE_URL}/api/public/{code}")
    resp.raise_for_status()
    print(f"  {code}: {resp.json()['title']}")


def main() -> None:
    print(f"Seeding against {BASE_URL}\n")

    with httpx.Client(timeout=10) as client:
        # 1. Create documents
        print("Documents:")
        codes = [create_document(client, doc) for doc in DOCUMENTS]

        # 2. Check every code redeems
        print("\nRedeemed:")
        for code in codes:
            redeem(client, code)

    print("\nDone!")


if __name__ == "__main__":
    main()
