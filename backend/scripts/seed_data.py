#!/usr/bin/env python3
"""Seed development database with sample houses.

Creates the resort's houses, some with discount rules, so pricing and
discount badges can be exercised locally:
- a weekend-only discount (Friday/Saturday nights)
- a discount limited to a summer date window
- a disabled discount and a house without one

Usage:
    python backend/scripts/seed_data.py --env dev
    python backend/scripts/seed_data.py --env dev --region ap-east-1
"""

import argparse
import os
import sys
from datetime import datetime, timezone

from shared.models import DiscountRule, House
from shared.services.dynamodb import DynamoDBService
from shared.services.houses import HouseService


def sample_houses(year: int) -> list[House]:
    """Sample houses with a representative mix of discount rules."""
    return [
        House(
            id="house-1",
            name="Ger 1",
            house_number=1,
            description="Traditional ger by the river",
            price=150000,
            capacity=4,
            discount=DiscountRule(
                price=120000,
                valid_days=[5, 6],
                label="Weekend special",
            ),
        ),
        House(
            id="house-2",
            name="Family cabin",
            house_number=2,
            description="Two-bedroom cabin with a terrace",
            price=250000,
            capacity=6,
            discount=DiscountRule(
                price=200000,
                is_active=True,
                start_date=datetime(year, 6, 1, tzinfo=timezone.utc),
                end_date=datetime(year, 8, 31, 23, 59, 59, tzinfo=timezone.utc),
                label="Summer promotion",
            ),
        ),
        House(
            id="house-3",
            name="Lakeside cottage",
            house_number=3,
            description="Cottage with lake view",
            price=180000,
            capacity=3,
            discount=DiscountRule(price=150000, is_active=False),
        ),
        House(
            id="house-4",
            name="VIP house",
            house_number=4,
            description="Sauna and private yard",
            price=400000,
            capacity=8,
        ),
    ]


def main() -> int:
    """Run the seed script."""
    parser = argparse.ArgumentParser(description="Seed development database with sample houses")
    parser.add_argument(
        "--env",
        choices=["dev", "staging", "prod"],
        default="dev",
        help="Target environment (default: dev)",
    )
    parser.add_argument(
        "--region",
        default=os.environ.get("AWS_DEFAULT_REGION", "ap-east-1"),
        help="AWS region (default: AWS_DEFAULT_REGION env var)",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=datetime.now(timezone.utc).year,
        help="Year of the summer promotion window (default: current year)",
    )

    args = parser.parse_args()
    os.environ["AWS_DEFAULT_REGION"] = args.region

    if args.env == "prod":
        confirm = input("WARNING: You are about to modify PRODUCTION data. Type 'yes' to continue: ")
        if confirm.lower() != "yes":
            print("Aborted.")
            return 1

    service = HouseService(DynamoDBService(args.env))
    print(f"Seeding houses into {service.db.table_name(HouseService.TABLE)}")

    for house in sample_houses(args.year):
        service.save_house(house)
        print(f"  {house.id}: {house.name} ({house.price} MNT)")

    print("Seed completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
