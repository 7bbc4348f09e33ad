"""Utility script to load sample rules and products into an empty database."""

from __future__ import annotations

import argparse
from decimal import Decimal

from app.application.use_cases.rules import create_rule
from app.domain.entities import Product
from app.domain.rules import RuleEngineError, StorageError
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.repositories import ProductRepository, RuleRepository

SAMPLE_RULES = (
    {
        "name": "MRP Presence Check",
        "target_field": "mrp",
        "kind": "presence",
        "description": "Ensures MRP is present on product listing",
    },
    {
        "name": "Country of Origin Check",
        "target_field": "country_of_origin",
        "kind": "presence",
        "description": "Ensures country of origin is specified",
    },
    {
        "name": "Net Quantity Format",
        "target_field": "net_quantity",
        "kind": "regex",
        "value": {"pattern": r"^\d+(\.\d+)?\s*(kg|g|l|ml|pcs|units?)$", "flags": "i"},
        "description": "Validates net quantity format with proper units",
    },
    {
        "name": "Manufacturer Details",
        "target_field": "manufacturer",
        "kind": "presence",
        "description": "Ensures manufacturer information is provided",
    },
    {
        "name": "Consumer Care Presence",
        "target_field": "consumer_care_details",
        "kind": "presence",
        "description": "Ensures consumer care details are provided",
    },
)

SAMPLE_PRODUCTS = (
    Product(
        id=None,
        name="Organic Basmati Rice",
        manufacturer="ABC Foods Pvt Ltd",
        description="Premium quality organic basmati rice",
        image_url="https://images.pexels.com/photos/33239/rice-grain-seed-food.jpg",
        mrp=Decimal("299.99"),
        net_quantity="1 kg",
        country_of_origin="India",
        platform="Amazon",
        platform_product_id="AMZ123456",
        compliance_status="compliant",
    ),
    Product(
        id=None,
        name="Instant Coffee Powder",
        manufacturer="XYZ Beverages",
        description="Rich and aromatic instant coffee",
        image_url="https://images.pexels.com/photos/894695/pexels-photo-894695.jpeg",
        mrp=Decimal("149.50"),
        net_quantity="100 g",
        country_of_origin="India",
        platform="Flipkart",
        platform_product_id="FLK789012",
        compliance_status="non-compliant",
    ),
    Product(
        id=None,
        name="Whole Wheat Flour",
        manufacturer="PQR Mills",
        description="Fresh whole wheat flour",
        image_url="https://images.pexels.com/photos/1640777/pexels-photo-1640777.jpeg",
        mrp=Decimal("89.00"),
        net_quantity="5 kg",
        country_of_origin="India",
        platform="Amazon",
        platform_product_id="AMZ345678",
        compliance_status="pending",
    ),
    Product(
        id=None,
        name="Green Tea Bags",
        manufacturer="DEF Tea Company",
        description="Premium green tea bags",
        image_url="https://images.pexels.com/photos/1417945/pexels-photo-1417945.jpeg",
        mrp=Decimal("199.99"),
        net_quantity="25 bags",
        country_of_origin="India",
        platform="Flipkart",
        platform_product_id="FLK456789",
        compliance_status="compliant",
    ),
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Load the sample Legal Metrology rules and products.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Seed even when rules or products already exist.",
    )
    parser.add_argument(
        "--created-by",
        default=None,
        help="User id recorded as the author of the sample rules (optional)",
    )
    return parser.parse_args()


def main() -> None:
    """Insert the sample data using the provided command line arguments."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        if not args.force and (
            RuleRepository(session).list(limit=1) or ProductRepository(session).list(limit=1)
        ):
            raise SystemExit("The database already holds data; pass --force to seed anyway.")

        for definition in SAMPLE_RULES:
            create_rule(session, created_by=args.created_by, **definition)
        products = ProductRepository(session)
        for product in SAMPLE_PRODUCTS:
            products.create(product)
    except (RuleEngineError, StorageError) as exc:
        raise SystemExit(f"Could not seed the database: {exc}") from exc
    finally:
        session.close()

    print(f"Seeded {len(SAMPLE_RULES)} rules and {len(SAMPLE_PRODUCTS)} products.")


if __name__ == "__main__":
    main()
