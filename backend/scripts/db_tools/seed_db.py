import sys
import os
import logging

from dotenv import load_dotenv

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), ".env"))

# Add the backend directory to python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from app.database import SessionLocal, engine, Base
import app.models
from app.models.food_item import FoodItem
from app.crud.food_item import create_food_item

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_FOOD_ITEMS = [
    # Breakfast
    dict(name="Oats Porridge", type="veg", meal_time="breakfast", calories_per_100g=68, protein=2.4, fat=1.4, carbs=12,
         suitable_for=["weight_loss", "maintain"], health_tags=["diabetic_friendly", "heart"],
         suitable_bmi=["normal", "overweight"], amount_per_kg="₹120–₹180/kg"),
    dict(name="Poha", type="veg", meal_time="breakfast", calories_per_100g=130, protein=2.6, fat=3, carbs=23,
         suitable_for=["maintain", "weight_gain"], health_tags=["heart"],
         suitable_bmi=["underweight", "normal"], amount_per_kg="₹60–₹80/kg"),
    dict(name="Egg Bhurji", type="non-veg", meal_time="breakfast", calories_per_100g=160, protein=11, fat=12, carbs=2,
         suitable_for=["weight_loss", "weight_gain", "maintain"], health_tags=["diabetic_friendly"],
         suitable_bmi=["underweight", "normal", "overweight"], amount_per_kg="₹140–₹160/kg"),

    # Lunch
    dict(name="Dal Tadka & Rice", type="veg", meal_time="lunch", calories_per_100g=120, protein=4.5, fat=2.5, carbs=20,
         suitable_for=["maintain", "weight_gain"], health_tags=["heart"],
         suitable_bmi=["underweight", "normal"], amount_per_kg="₹90–₹110/kg"),
    dict(name="Moong Dal Khichdi", type="veg", meal_time="lunch", calories_per_100g=105, protein=4, fat=2, carbs=18,
         suitable_for=["weight_loss", "maintain"], health_tags=["diabetic_friendly", "heart"],
         suitable_bmi=["normal", "overweight"], amount_per_kg="₹80–₹100/kg"),
    dict(name="Grilled Chicken & Brown Rice", type="non-veg", meal_time="lunch", calories_per_100g=150, protein=15,
         fat=4, carbs=13, suitable_for=["weight_loss", "weight_gain"], health_tags=["diabetic_friendly"],
         suitable_bmi=["normal", "overweight"], amount_per_kg="₹250–₹320/kg"),

    # Dinner
    dict(name="Paneer Bhurji & Roti", type="veg", meal_time="dinner", calories_per_100g=210, protein=10, fat=12, carbs=15,
         suitable_for=["weight_gain", "maintain"], health_tags=[],
         suitable_bmi=["underweight", "normal"], amount_per_kg="₹280–₹340/kg"),
    dict(name="Vegetable Soup & Salad", type="veg", meal_time="dinner", calories_per_100g=45, protein=1.5, fat=1, carbs=7,
         suitable_for=["weight_loss"], health_tags=["diabetic_friendly", "heart"],
         suitable_bmi=["overweight"], amount_per_kg="₹70/kg"),
    dict(name="Fish Curry & Rice", type="non-veg", meal_time="dinner", calories_per_100g=140, protein=12, fat=5, carbs=12,
         suitable_for=["weight_loss", "maintain"], health_tags=["heart"],
         suitable_bmi=["normal", "overweight"], amount_per_kg="₹300–₹400/kg"),
]

def seed_food_items():
    # Ensure tables exist
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        # Check if we already have items
        if db.query(FoodItem).count() > 0:
            logger.info("Food items already seeded.")
            return

        for fields in SAMPLE_FOOD_ITEMS:
            create_food_item(db, **fields)

        logger.info(f"Seeded {len(SAMPLE_FOOD_ITEMS)} food items successfully.")
    finally:
        db.close()

if __name__ == "__main__":
    seed_food_items()
