import math
import re
from types import MappingProxyType
from typing import Optional, Tuple

# Profession -> activity multiplier applied to BMR.
# Anything not listed (or no profession at all) gets DEFAULT_ACTIVITY_MULTIPLIER.
ACTIVITY_MULTIPLIERS = MappingProxyType({
    'developer': 1.2,
    'teacher': 1.4,
    'athlete': 1.8,
    'construction_worker': 1.7,
    'student': 1.3,
})
DEFAULT_ACTIVITY_MULTIPLIER = 1.3

GOAL_ADJUSTMENTS = MappingProxyType({
    'weight_loss': -500,
    'weight_gain': 300,
})


def round_half_up(value: float) -> int:
    """Rounds .5 upwards (2.5 -> 3), unlike Python's banker's rounding."""
    return math.floor(value + 0.5)


def calculate_bmi(weight: float, height: float) -> float:
    """Weight in kg, height in cm."""
    height_m = height / 100
    return weight / (height_m * height_m)


def classify_bmi(bmi: float) -> str:
    if bmi < 18.5:
        return "underweight"
    if bmi > 25:
        return "overweight"
    return "normal"


def calculate_bmr(weight: float, height: float, age: float, gender: str) -> float:
    """
    Mifflin-St Jeor Equation to calculate BMR.
    """
    s = 5 if gender == 'male' else -161
    return (10 * weight) + (6.25 * height) - (5 * age) + s


def get_activity_multiplier(profession: Optional[str]) -> float:
    if not profession:
        return DEFAULT_ACTIVITY_MULTIPLIER
    return ACTIVITY_MULTIPLIERS.get(profession.lower(), DEFAULT_ACTIVITY_MULTIPLIER)


def calculate_daily_calories(
    weight: float,
    height: float,
    age: float,
    gender: str,
    profession: Optional[str],
    goal: str
) -> int:
    """
    BMR x profession multiplier, then the goal adjustment:
    -500 kcal for weight_loss, +300 kcal for weight_gain.
    """
    calories = calculate_bmr(weight, height, age, gender) * get_activity_multiplier(profession)
    calories += GOAL_ADJUSTMENTS.get(goal, 0)
    return round_half_up(calories)


def parse_amount_per_kg(amount: Optional[str]) -> Optional[int]:
    """
    Averages every integer in a free-text price string.
    Examples:
        "₹120–₹180/kg" -> 150
        "₹90/kg" -> 90
        "ask vendor" -> None
    """
    if not amount:
        return None
    numbers = re.findall(r'\d+', amount)
    if not numbers:
        return None
    return round_half_up(sum(int(n) for n in numbers) / len(numbers))


def estimate_grams_and_cost(food, required_calories: float) -> Tuple[int, Optional[int]]:
    """
    Grams of `food` needed to hit `required_calories`, and what that costs.

    Returns (0, 0) when the item has no calorie or price data,
    and (grams, None) when the price text has no usable number.
    """
    calories_per_100g = getattr(food, 'calories_per_100g', None) if food is not None else None
    amount_per_kg = getattr(food, 'amount_per_kg', None) if food is not None else None
    if not calories_per_100g or not amount_per_kg:
        return 0, 0

    cal_per_gram = calories_per_100g / 100
    grams = math.ceil(required_calories / cal_per_gram)

    price_per_kg = parse_amount_per_kg(amount_per_kg)
    if not price_per_kg:
        return grams, None

    cost = math.ceil(price_per_kg * grams / 1000)
    return grams, cost
