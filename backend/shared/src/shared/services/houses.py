"""House repository backed by DynamoDB.

Items keep the document store's camelCase layout with timestamps as epoch
milliseconds, e.g.::

    {"id": "house-1", "name": "Ger 1", "price": 100000, "capacity": 4,
     "discount": {"price": 70000, "isActive": True, "validDays": [5, 6]}}
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from shared.models import DiscountRule, House
from shared.utils.dates import epoch_ms
from shared.utils.logging import get_logger

if TYPE_CHECKING:
    from .dynamodb import DynamoDBService

logger = get_logger(__name__)


def _from_dynamo(value: Any) -> Any:
    """Convert DynamoDB types (Decimal, number sets) to plain Python values."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(_from_dynamo(v) for v in value)
    if isinstance(value, list):
        return [_from_dynamo(v) for v in value]
    if isinstance(value, dict):
        return {k: _from_dynamo(v) for k, v in value.items()}
    return value


def _parse_bool(raw: Any) -> bool | None:
    # isActive may be stored as bool or string
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw.lower() == "true"
    return bool(raw)


class HouseService:
    """Service for reading and updating houses."""

    TABLE = "houses"

    def __init__(self, db: "DynamoDBService") -> None:
        """Initialize house service.

        Args:
            db: DynamoDB service instance
        """
        self.db = db

    def get_house(self, house_id: str) -> House | None:
        """Get a house by ID.

        Args:
            house_id: House ID

        Returns:
            House or None if not found
        """
        item = self.db.get_item(self.TABLE, {"id": house_id})
        if item is None:
            return None
        return self._item_to_house(item)

    def list_houses(self) -> list[House]:
        """Get all houses ordered by house number."""
        houses = [self._item_to_house(item) for item in self.db.scan(self.TABLE)]
        return sorted(houses, key=lambda h: (h.house_number, h.id))

    def save_house(self, house: House) -> bool:
        """Create or replace a house.

        Args:
            house: House to store

        Returns:
            True if stored
        """
        return self.db.put_item(self.TABLE, self._house_to_item(house))

    def update_discount(
        self,
        house_id: str,
        discount: DiscountRule | None,
    ) -> House | None:
        """Set or remove a house's discount rule.

        Args:
            house_id: House ID
            discount: New rule, or None to remove the current one

        Returns:
            Updated house, or None if the house does not exist
        """
        if discount is None:
            attrs = self.db.update_item(
                self.TABLE,
                key={"id": house_id},
                update_expression="REMOVE #discount",
                expression_attribute_names={"#id": "id", "#discount": "discount"},
                condition_expression="attribute_exists(#id)",
            )
        else:
            attrs = self.db.update_item(
                self.TABLE,
                key={"id": house_id},
                update_expression="SET #discount = :discount",
                expression_attribute_names={"#id": "id", "#discount": "discount"},
                expression_attribute_values={
                    ":discount": self._discount_to_item(discount)
                },
                condition_expression="attribute_exists(#id)",
            )

        if attrs is None:
            logger.warning("Discount update for unknown house %s", house_id)
            return None

        logger.info(
            "Discount %s for house %s",
            "removed" if discount is None else "updated",
            house_id,
        )
        return self._item_to_house(attrs)

    def _item_to_house(self, item: dict[str, Any]) -> House:
        """Convert DynamoDB item to House model."""
        data = _from_dynamo(item)

        discount = data.get("discount")
        if isinstance(discount, dict):
            discount["isActive"] = _parse_bool(discount.get("isActive"))

        return House.model_validate(data)

    def _discount_to_item(self, discount: DiscountRule) -> dict[str, Any]:
        """Convert DiscountRule to a DynamoDB map."""
        item: dict[str, Any] = {"price": discount.price}
        if discount.is_active is not None:
            item["isActive"] = discount.is_active
        if discount.start_date is not None:
            item["startDate"] = epoch_ms(discount.start_date)
        if discount.end_date is not None:
            item["endDate"] = epoch_ms(discount.end_date)
        if discount.valid_days is not None:
            item["validDays"] = list(discount.valid_days)
        if discount.label:
            item["label"] = discount.label
        return item

    def _house_to_item(self, house: House) -> dict[str, Any]:
        """Convert House model to a DynamoDB item."""
        item: dict[str, Any] = {
            "id": house.id,
            "name": house.name,
            "houseNumber": house.house_number,
            "description": house.description,
            "price": house.price,
            "capacity": house.capacity,
            "status": house.status.value,
        }
        if house.image_url:
            item["imageUrl"] = house.image_url
        if house.discount is not None:
            item["discount"] = self._discount_to_item(house.discount)
        if house.created_at is not None:
            item["createdAt"] = epoch_ms(house.created_at)
        return item
