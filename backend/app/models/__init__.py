# Import all models here
from app.models.user import User
from app.models.food_item import FoodItem
from app.models.diet_plan import SavedDietPlan
