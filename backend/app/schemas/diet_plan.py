from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import datetime


class DietPlanInput(BaseModel):
    age: float = Field(..., gt=0, description="Age in years")
    gender: str = Field(..., min_length=1, description="'male' or anything else")
    weight: float = Field(..., gt=0, description="Current weight in kg")
    height: float = Field(..., gt=0, description="Height in cm")
    health_issues: Optional[List[str]] = Field(default_factory=list, description="e.g. diabetic_friendly, heart")
    profession: Optional[str] = Field(None, description="developer, teacher, athlete, construction_worker, student")
    goal: str = Field(
        ...,
        pattern="^(weight_loss|weight_gain|maintain)$",
        description="weight_loss, weight_gain, or maintain"
    )
    budget_per_month: float = Field(..., ge=0, description="Monthly food budget in rupees")
    duration_in_months: int = Field(..., gt=0)
    preference: str = Field(..., min_length=1, description="Diet type, e.g. veg or non-veg")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "age": 30,
                "gender": "male",
                "weight": 70,
                "height": 175,
                "health_issues": ["diabetic_friendly"],
                "profession": "developer",
                "goal": "maintain",
                "budget_per_month": 6000,
                "duration_in_months": 1,
                "preference": "veg"
            }
        }


class FoodItemOut(BaseModel):
    id: Optional[int] = None
    name: str
    type: str
    meal_time: str
    calories_per_100g: Optional[float] = None
    protein: Optional[float] = None
    fat: Optional[float] = None
    carbs: Optional[float] = None
    suitable_for: List[str] = []
    health_tags: List[str] = []
    suitable_bmi: List[str] = []
    amount_per_kg: Optional[str] = None
    image: Optional[str] = None

    class Config:
        from_attributes = True


class MealAssignment(FoodItemOut):
    consumption_in_grams: int


class DayPlan(BaseModel):
    day: int
    breakfast: Optional[MealAssignment] = None
    lunch: Optional[MealAssignment] = None
    dinner: Optional[MealAssignment] = None


class DietPlanResult(BaseModel):
    daily_calorie_goal: int
    total_days: int
    total_food_required_per_day_in_grams: int
    estimated_daily_cost_in_rupees: Optional[int] = None
    estimated_monthly_cost_in_rupees: Optional[int] = None
    budget_message: Optional[str] = None
    # Only set by the preview when the budget does not cover the plan
    budget_shortfall_in_rupees: Optional[Union[int, float]] = None
    plan: Optional[List[DayPlan]] = None


class DietPlanSaveRequest(DietPlanInput):
    """User input plus the plan returned by /generate, sent back flat."""
    daily_calorie_goal: Optional[int] = None
    total_days: Optional[int] = None
    total_food_required_per_day_in_grams: Optional[int] = None
    estimated_daily_cost_in_rupees: Optional[int] = None
    estimated_monthly_cost_in_rupees: Optional[int] = None
    budget_message: Optional[str] = None
    plan: Optional[List[DayPlan]] = None

    def split(self):
        """Returns (DietPlanInput, result dict without unset fields) for persistence."""
        input_fields = set(DietPlanInput.model_fields)
        data = self.model_dump(mode="json")
        plan_input = DietPlanInput(**{k: v for k, v in data.items() if k in input_fields})
        result = {k: v for k, v in data.items() if k not in input_fields and v is not None}
        return plan_input, result


class SavedDietPlanResponse(BaseModel):
    id: int
    user_id: int
    input: DietPlanInput
    plan: dict
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SaveDietPlanResponse(BaseModel):
    message: str
    saved_plan: SavedDietPlanResponse


class UpdateDietPlanResponse(BaseModel):
    message: str
    updated_plan: SavedDietPlanResponse


class SavedDietPlanList(BaseModel):
    message: str
    plans: List[SavedDietPlanResponse]
