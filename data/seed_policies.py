"""
Seed script for populating the policy directory with sample policies.
Run with: python data/seed_policies.py [path]
"""
import json
import sys
from datetime import date, timedelta
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from claimgenie.core.config import settings


def build_sample_policies(today: date) -> dict:
    """Sample policies: three active, one expired."""
    return {
        "POL1001": {
            "name": "Aarav Sharma",
            "policyType": "Health",
            "validTill": (today + timedelta(days=365)).isoformat(),
            "coverage": "Hospitalization up to 500000",
        },
        "POL1002": {
            "name": "Maria Lopez",
            "policyType": "Auto",
            "validTill": (today + timedelta(days=180)).isoformat(),
            "coverage": "Comprehensive",
            "vehicle": "2021 Honda Civic",
        },
        "POL1003": {
            "name": "James Okafor",
            "policyType": "Home",
            "validTill": (today + timedelta(days=30)).isoformat(),
            "coverage": "Fire, theft and water damage",
        },
        "POL0999": {
            "name": "Lena Fischer",
            "policyType": "Travel",
            "validTill": (today - timedelta(days=60)).isoformat(),
            "coverage": "Trip cancellation",
        },
    }


def seed_policies(path: Path) -> None:
    """Write the sample policies, keeping any policies already on file."""
    print("\n" + "=" * 60)
    print("SEEDING POLICY DIRECTORY WITH SAMPLE POLICIES")
    print("=" * 60 + "\n")

    existing = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            existing = json.load(f)

    for policy_number, policy in build_sample_policies(date.today()).items():
        if policy_number in existing:
            print(f"  Skipping {policy_number} (already exists)")
            continue
        existing[policy_number] = policy
        print(f"  Added {policy_number} ({policy['policyType']}, valid till {policy['validTill']})")

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(existing, f, indent=2)

    print(f"\nWrote {len(existing)} policies to {path}")


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(settings.POLICIES_FILE)
    seed_policies(target)
