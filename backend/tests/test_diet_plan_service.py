import unittest
from types import SimpleNamespace
from unittest.mock import patch
from app.schemas.diet_plan import DietPlanInput
from app.services.diet_plan_service import (
    build_diet_plan, preview_diet_plan, select_food_items, group_by_meal,
    resolve_meal_for_day, NoMatchingFoodError, BudgetTooLowError
)


def make_food(name, meal_time, type="veg", calories_per_100g=200, amount_per_kg="₹120–₹180/kg",
              suitable_for=("maintain",), health_tags=(), suitable_bmi=("normal",)):
    return SimpleNamespace(
        id=None, name=name, type=type, meal_time=meal_time,
        calories_per_100g=calories_per_100g, protein=5.0, fat=2.0, carbs=20.0,
        suitable_for=list(suitable_for), health_tags=list(health_tags), suitable_bmi=list(suitable_bmi),
        amount_per_kg=amount_per_kg, image=None,
    )


class FakeCatalog:
    """In-memory catalog that records every lookup."""

    def __init__(self, items):
        self.items = items
        self.find_calls = []
        self.find_one_calls = []

    def find(self, goal=None, diet_type=None, bmi_category=None, health_tags=None):
        self.find_calls.append(dict(goal=goal, diet_type=diet_type, bmi_category=bmi_category, health_tags=health_tags))
        found = []
        for i in self.items:
            if goal is not None and goal not in i.suitable_for:
                continue
            if diet_type is not None and i.type != diet_type:
                continue
            if bmi_category is not None and bmi_category not in i.suitable_bmi:
                continue
            if health_tags and not set(health_tags) & set(i.health_tags):
                continue
            found.append(i)
        return found

    def find_one(self, meal_time, diet_type):
        self.find_one_calls.append((meal_time, diet_type))
        for i in self.items:
            if i.meal_time == meal_time and i.type == diet_type:
                return i
        return None


def make_input(**overrides):
    # BMR = 10*62.75 + 6.25*175 - 5*30 + 5 = 1576.25; x1.2 = 1891.5 -> 1892 kcal, 630 per meal
    fields = dict(
        age=30, gender="male", weight=62.75, height=175, health_issues=[],
        profession="developer", goal="maintain", budget_per_month=5000,
        duration_in_months=1, preference="veg",
    )
    fields.update(overrides)
    return DietPlanInput(**fields)


class TestSelectFoodItems(unittest.TestCase):

    def test_strict_match_uses_all_filters(self):
        oats = make_food("Oats", "breakfast", health_tags=["heart"])
        catalog = FakeCatalog([oats, make_food("Poha", "breakfast")])

        items = select_food_items(catalog, "maintain", "veg", "normal", ["heart"])

        self.assertEqual(items, [oats])
        self.assertEqual(len(catalog.find_calls), 1)
        self.assertEqual(catalog.find_calls[0], dict(
            goal="maintain", diet_type="veg", bmi_category="normal", health_tags=["heart"]
        ))

    def test_no_health_issues_skips_tag_filter(self):
        catalog = FakeCatalog([make_food("Poha", "breakfast")])
        items = select_food_items(catalog, "maintain", "veg", "normal", [])
        self.assertEqual(len(items), 1)
        self.assertIsNone(catalog.find_calls[0]["health_tags"])

    def test_relaxes_bmi_then_falls_back_to_diet_type(self):
        underweight_only = make_food("Banana Shake", "breakfast", suitable_bmi=["underweight"])
        catalog = FakeCatalog([underweight_only])
        self.assertEqual(select_food_items(catalog, "maintain", "veg", "normal", None), [underweight_only])
        self.assertEqual(len(catalog.find_calls), 2)
        self.assertIsNone(catalog.find_calls[1]["bmi_category"])

        other_goal = make_food("Salad", "lunch", suitable_for=["weight_loss"])
        catalog = FakeCatalog([other_goal])
        self.assertEqual(select_food_items(catalog, "weight_gain", "veg", "normal", None), [other_goal])
        self.assertEqual(len(catalog.find_calls), 3)
        self.assertEqual(catalog.find_calls[2], dict(
            goal=None, diet_type="veg", bmi_category=None, health_tags=None
        ))

    def test_no_match_after_three_attempts(self):
        catalog = FakeCatalog([make_food("Chicken", "lunch", type="non-veg")])
        with self.assertRaises(NoMatchingFoodError):
            select_food_items(catalog, "maintain", "veg", "normal", None)
        self.assertEqual(len(catalog.find_calls), 3)


class TestGrouping(unittest.TestCase):

    def test_group_by_meal(self):
        a = make_food("A", "breakfast")
        b = make_food("B", "dinner")
        c = make_food("C", "breakfast")
        snack = make_food("Nuts", "snack")
        groups = group_by_meal([a, b, c, snack])
        self.assertEqual(groups, {"breakfast": [a, c], "lunch": [], "dinner": [b]})

    def test_round_robin(self):
        a = make_food("A", "breakfast")
        b = make_food("B", "breakfast")
        groups = group_by_meal([a, b])
        picked = [resolve_meal_for_day(groups, "breakfast", day, "veg", FakeCatalog([])) for day in range(5)]
        self.assertEqual(picked, [a, b, a, b, a])

    def test_empty_slot_falls_back_to_catalog(self):
        dinner = make_food("Khichdi", "dinner", suitable_for=["weight_loss"])
        catalog = FakeCatalog([dinner])
        groups = group_by_meal([make_food("A", "breakfast")])
        self.assertIs(resolve_meal_for_day(groups, "dinner", 3, "veg", catalog), dinner)
        self.assertIsNone(resolve_meal_for_day(groups, "lunch", 3, "veg", catalog))


class TestBuildDietPlan(unittest.TestCase):

    def setUp(self):
        self.breakfasts = [make_food("Oats", "breakfast"), make_food("Poha", "breakfast")]
        self.lunch = make_food("Dal Rice", "lunch")
        self.dinner = make_food("Paneer Roti", "dinner")
        self.catalog = FakeCatalog(self.breakfasts + [self.lunch, self.dinner])

    def test_within_budget(self):
        result = build_diet_plan(make_input(), self.catalog)

        self.assertEqual(result.daily_calorie_goal, 1892)
        self.assertEqual(result.total_days, 30)
        # 630 kcal per meal at 200 kcal/100g -> 315 g, ₹150/kg -> ₹48
        self.assertEqual(result.total_food_required_per_day_in_grams, 945)
        self.assertEqual(result.estimated_daily_cost_in_rupees, 144)
        self.assertEqual(result.estimated_monthly_cost_in_rupees, 4320)
        self.assertEqual(result.budget_message, "You're within budget! You will save ₹680 this month.")

        self.assertEqual(len(result.plan), 30)
        first, second = result.plan[0], result.plan[1]
        self.assertEqual(first.day, 1)
        self.assertEqual(first.breakfast.name, "Oats")
        self.assertEqual(second.breakfast.name, "Poha")
        self.assertEqual(first.lunch.name, "Dal Rice")
        self.assertEqual(first.dinner.consumption_in_grams, 315)
        self.assertEqual(result.plan[-1].day, 30)

    def test_total_days_follow_duration(self):
        result = build_diet_plan(make_input(duration_in_months=2, budget_per_month=10000), self.catalog)
        self.assertEqual(result.total_days, 60)
        self.assertEqual(len(result.plan), 60)

    def test_budget_equal_to_cost_succeeds(self):
        result = build_diet_plan(make_input(budget_per_month=4320), self.catalog)
        self.assertEqual(result.budget_message, "You're within budget! You will save ₹0 this month.")
        self.assertEqual(len(result.plan), 30)

    def test_budget_too_low(self):
        with self.assertRaises(BudgetTooLowError) as ctx:
            build_diet_plan(make_input(budget_per_month=4319), self.catalog)
        self.assertEqual(ctx.exception.required_monthly_cost, 4320)
        self.assertEqual(ctx.exception.shortfall, 1)
        self.assertIn("₹4320", str(ctx.exception))

    def test_preview_keeps_numbers_without_plan(self):
        result = preview_diet_plan(make_input(budget_per_month=1000), self.catalog)
        self.assertIsNone(result.plan)
        self.assertEqual(result.estimated_monthly_cost_in_rupees, 4320)
        self.assertEqual(result.budget_shortfall_in_rupees, 3320)
        self.assertIsInstance(result.budget_shortfall_in_rupees, int)
        self.assertIn("increasing your budget to ₹4320", result.budget_message)

    def test_preview_reraises_shortfall_without_numbers(self):
        with patch("app.services.diet_plan_service.build_diet_plan", side_effect=BudgetTooLowError(4320, 1000)):
            with self.assertRaises(BudgetTooLowError) as ctx:
                preview_diet_plan(make_input(budget_per_month=1000), self.catalog)
        self.assertIsNone(ctx.exception.partial)
        self.assertEqual(ctx.exception.shortfall, 3320)

    def test_fractional_shortfall_is_kept(self):
        with self.assertRaises(BudgetTooLowError) as ctx:
            build_diet_plan(make_input(budget_per_month=4319.5), self.catalog)
        self.assertEqual(ctx.exception.shortfall, 0.5)

    def test_unknown_price_counts_as_zero(self):
        self.lunch.amount_per_kg = "market rate"
        result = build_diet_plan(make_input(), self.catalog)
        self.assertEqual(result.estimated_daily_cost_in_rupees, 96)
        self.assertEqual(result.total_food_required_per_day_in_grams, 945)

    def test_no_prices_at_all_reports_null_cost(self):
        for food in self.catalog.items:
            food.amount_per_kg = None
        result = build_diet_plan(make_input(budget_per_month=0), self.catalog)
        self.assertIsNone(result.estimated_daily_cost_in_rupees)
        self.assertIsNone(result.estimated_monthly_cost_in_rupees)
        self.assertEqual(result.total_food_required_per_day_in_grams, 0)
        self.assertEqual(result.plan[0].breakfast.consumption_in_grams, 0)

    def test_missing_slot_uses_single_fallback_lookup(self):
        catalog = FakeCatalog([make_food("Oats", "breakfast")])
        result = build_diet_plan(make_input(), catalog)
        self.assertTrue(all(day.lunch is None and day.dinner is None for day in result.plan))
        # One lookup per empty slot for the whole build
        self.assertEqual(sorted(catalog.find_one_calls), [("dinner", "veg"), ("lunch", "veg")])

    def test_no_matching_food(self):
        with self.assertRaises(NoMatchingFoodError):
            build_diet_plan(make_input(preference="vegan"), self.catalog)


if __name__ == '__main__':
    unittest.main()
