from sqlalchemy import Column, Integer, String, Float
from app.database import Base, JSONType

class FoodItem(Base):
    __tablename__ = "food_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    type = Column(String, index=True, nullable=False)       # "veg", "non-veg"
    meal_time = Column(String, index=True, nullable=False)  # "breakfast", "lunch", "dinner"

    calories_per_100g = Column(Float, nullable=True)
    protein = Column(Float, nullable=True)
    fat = Column(Float, nullable=True)
    carbs = Column(Float, nullable=True)

    # Applicability tags
    suitable_for = Column(JSONType, nullable=False, default=list, comment="Goals, e.g. weight_loss, weight_gain")
    health_tags = Column(JSONType, nullable=False, default=list, comment="e.g. diabetic_friendly, heart")
    suitable_bmi = Column(JSONType, nullable=False, default=list, comment="underweight, normal, overweight")

    amount_per_kg = Column(String, nullable=True)  # Free text, e.g. "₹120–₹180/kg"
    image = Column(String, nullable=True)
