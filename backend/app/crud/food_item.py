from typing import Iterable, List, Optional
from sqlalchemy.orm import Session
from app.models.food_item import FoodItem

"""
Food Catalog
------------
Read-only lookups over the food_items table, shaped as the catalog capability
the diet plan builder expects (`find` and `find_one`).

Tag columns are JSON lists, so list-membership filters are applied after the
SQL query. That keeps the same code working on SQLite and PostgreSQL.
"""


def _has_any(values, wanted: Iterable[str]) -> bool:
    return bool(set(values or []) & set(wanted))


class SqlFoodCatalog:
    def __init__(self, db: Session):
        self.db = db

    def find(
        self,
        goal: Optional[str] = None,
        diet_type: Optional[str] = None,
        bmi_category: Optional[str] = None,
        health_tags: Optional[List[str]] = None
    ) -> List[FoodItem]:
        """All items matching every filter that is given."""
        query = self.db.query(FoodItem)
        if diet_type is not None:
            query = query.filter(FoodItem.type == diet_type)
        items = query.order_by(FoodItem.id).all()

        if goal is not None:
            items = [i for i in items if goal in (i.suitable_for or [])]
        if bmi_category is not None:
            items = [i for i in items if bmi_category in (i.suitable_bmi or [])]
        if health_tags:
            items = [i for i in items if _has_any(i.health_tags, health_tags)]
        return items

    def find_one(self, meal_time: str, diet_type: str) -> Optional[FoodItem]:
        """Any single item for the meal slot and diet type."""
        return self.db.query(FoodItem).filter(
            FoodItem.meal_time == meal_time,
            FoodItem.type == diet_type
        ).order_by(FoodItem.id).first()


def create_food_item(db: Session, **fields) -> FoodItem:
    db_item = FoodItem(**fields)
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    return db_item
