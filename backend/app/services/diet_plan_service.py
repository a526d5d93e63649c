import logging
from typing import Dict, List, Optional

from app.schemas.diet_plan import DietPlanInput, DietPlanResult, DayPlan, MealAssignment, FoodItemOut
from app.utils import nutrition_calc

logger = logging.getLogger(__name__)

"""
Diet Plan Service
-----------------
Builds a diet plan from biometrics and preferences.
1. Calorie target (BMR x profession multiplier +/- goal adjustment).
2. Food selection through a three-step relaxation ladder.
3. Grouping by meal slot, round-robin across days.
4. Grams and cost per meal, checked against the monthly budget.

The catalog is passed in as a capability with two methods:
    find(goal=, diet_type=, bmi_category=, health_tags=) -> list of items
    find_one(meal_time, diet_type) -> item or None
so the same code serves /generate and the rebuild on update.
"""

MEAL_SLOTS = ("breakfast", "lunch", "dinner")
DAYS_PER_MONTH = 30


class DietPlanError(ValueError):
    """Base for plan failures the caller can act on."""


class NoMatchingFoodError(DietPlanError):
    def __init__(self):
        super().__init__(
            "No food items match your preferences. Please adjust input or update the food database."
        )


class BudgetTooLowError(DietPlanError):
    def __init__(self, required_monthly_cost: int, budget_per_month: float, partial: Optional[DietPlanResult] = None):
        self.required_monthly_cost = required_monthly_cost
        self.shortfall = _format_amount(required_monthly_cost - budget_per_month)
        # Derived numbers, without the day-by-day plan
        self.partial = partial
        super().__init__(budget_too_low_message(required_monthly_cost))


def budget_too_low_message(required_monthly_cost) -> str:
    return (
        "Your current budget may be too low to meet your nutritional needs. "
        f"Please consider increasing your budget to ₹{required_monthly_cost}."
    )


def within_budget_message(savings) -> str:
    return f"You're within budget! You will save ₹{_format_amount(savings)} this month."


def _format_amount(amount):
    # 6000.0 -> 6000, 99.5 stays 99.5
    if isinstance(amount, float) and amount.is_integer():
        return int(amount)
    return amount


def derive_calorie_target(plan_input: DietPlanInput) -> int:
    return nutrition_calc.calculate_daily_calories(
        weight=plan_input.weight,
        height=plan_input.height,
        age=plan_input.age,
        gender=plan_input.gender,
        profession=plan_input.profession,
        goal=plan_input.goal,
    )


def select_food_items(catalog, goal: str, preference: str, bmi_category: str, health_issues: Optional[List[str]]):
    """
    Relaxation ladder:
    1. goal + diet type + BMI category (+ health tags, when given)
    2. same, without the BMI category
    3. diet type only
    Raises NoMatchingFoodError when all three come back empty.
    """
    health_tags = list(health_issues) if health_issues else None

    items = catalog.find(goal=goal, diet_type=preference, bmi_category=bmi_category, health_tags=health_tags)
    logger.info(f"Strict match: {len(items)} items")

    if not items:
        items = catalog.find(goal=goal, diet_type=preference, health_tags=health_tags)
        logger.info(f"Relaxed (no BMI): {len(items)} items")

    if not items:
        items = catalog.find(diet_type=preference)
        logger.info(f"Fallback match: {len(items)} items")

    if not items:
        raise NoMatchingFoodError()
    return list(items)


def group_by_meal(items) -> Dict[str, list]:
    meals = {slot: [] for slot in MEAL_SLOTS}
    for food in items:
        if food.meal_time in meals:
            meals[food.meal_time].append(food)
    return meals


def resolve_meal_for_day(groups: Dict[str, list], slot: str, day_index: int, preference: str, catalog):
    """
    Round-robin over the slot's matches; an empty slot falls back to any
    catalog item for that slot and diet type (None if there is none).
    """
    options = groups.get(slot) or []
    if options:
        return options[day_index % len(options)]
    return catalog.find_one(meal_time=slot, diet_type=preference)


class _FallbackCache:
    """Wraps the catalog so each empty slot's fallback is looked up once per build."""

    def __init__(self, catalog):
        self.catalog = catalog
        self._found = {}

    def find_one(self, meal_time, diet_type):
        key = (meal_time, diet_type)
        if key not in self._found:
            self._found[key] = self.catalog.find_one(meal_time=meal_time, diet_type=diet_type)
        return self._found[key]


def _assign(food, grams: int) -> Optional[MealAssignment]:
    if food is None:
        return None
    data = FoodItemOut.model_validate(food).model_dump()
    return MealAssignment(**data, consumption_in_grams=grams)


def build_diet_plan(plan_input: DietPlanInput, catalog) -> DietPlanResult:
    """
    Builds the full plan. Raises NoMatchingFoodError or BudgetTooLowError.
    Reads from the catalog only, nothing is written.
    """
    bmi = nutrition_calc.calculate_bmi(plan_input.weight, plan_input.height)
    bmi_category = nutrition_calc.classify_bmi(bmi)

    daily_calories = derive_calorie_target(plan_input)
    total_days = plan_input.duration_in_months * DAYS_PER_MONTH
    per_meal_calories = daily_calories // 3

    logger.info(
        f"Building diet plan: BMI {bmi:.2f} ({bmi_category}), {daily_calories} kcal/day, "
        f"{total_days} days, goal={plan_input.goal}, preference={plan_input.preference}"
    )

    items = select_food_items(
        catalog,
        goal=plan_input.goal,
        preference=plan_input.preference,
        bmi_category=bmi_category,
        health_issues=plan_input.health_issues,
    )
    groups = group_by_meal(items)
    lookup = _FallbackCache(catalog)

    # Day one's meals set the cost estimate for every day
    first_day = [
        resolve_meal_for_day(groups, slot, 0, plan_input.preference, lookup)
        for slot in MEAL_SLOTS
    ]
    stats = [nutrition_calc.estimate_grams_and_cost(food, per_meal_calories) for food in first_day]

    total_grams_per_day = sum(grams for grams, _ in stats)
    # Unknown prices count as zero
    total_cost_per_day = sum((cost or 0) for _, cost in stats)
    total_cost_per_month = total_cost_per_day * DAYS_PER_MONTH

    result = DietPlanResult(
        daily_calorie_goal=daily_calories,
        total_days=total_days,
        total_food_required_per_day_in_grams=total_grams_per_day,
        estimated_daily_cost_in_rupees=total_cost_per_day or None,
        estimated_monthly_cost_in_rupees=total_cost_per_month or None,
    )

    if plan_input.budget_per_month < total_cost_per_month:
        logger.info(f"Budget too low: {plan_input.budget_per_month} < {total_cost_per_month}")
        raise BudgetTooLowError(total_cost_per_month, plan_input.budget_per_month, partial=result)

    savings = plan_input.budget_per_month - total_cost_per_month
    result.budget_message = within_budget_message(savings)

    plan = []
    for day_index in range(total_days):
        meals = {}
        for slot in MEAL_SLOTS:
            food = resolve_meal_for_day(groups, slot, day_index, plan_input.preference, lookup)
            grams, _ = nutrition_calc.estimate_grams_and_cost(food, per_meal_calories)
            meals[slot] = _assign(food, grams)
        plan.append(DayPlan(day=day_index + 1, **meals))

    result.plan = plan
    return result


def preview_diet_plan(plan_input: DietPlanInput, catalog) -> DietPlanResult:
    """
    Stateless /generate. A budget shortfall is not an error here: the
    derived numbers come back with a warning message and no day-by-day plan.
    NoMatchingFoodError still propagates.
    """
    try:
        return build_diet_plan(plan_input, catalog)
    except BudgetTooLowError as e:
        if e.partial is None:
            raise
        result = e.partial.model_copy()
        result.budget_message = str(e)
        result.budget_shortfall_in_rupees = e.shortfall
        result.plan = None
        return result
