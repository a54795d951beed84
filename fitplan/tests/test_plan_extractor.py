import unittest
from fitplan.domain.DailyPlan import label_for_index
from fitplan.domain.MealEntry import default_meal
from fitplan.logic.parsing.plan_extractor import extract_plan
from fitplan.utilities.images import image_url_for

SAMPLE_DAY = (
    "Day 1:\n"
    "Breakfast: Oatmeal: Warm oats with honey\n"
    "Lunch: Salad: Greens\n"
    "Dinner: Chicken: Grilled\n"
    "Snacks:\n"
    "- Apple: Fresh fruit\n"
)

THREE_DAYS = (
    "Here is your plan!\n\n"
    "Day 1:\nBreakfast: Eggs: Scrambled\nLunch: Wrap: Turkey wrap\nDinner: Salmon: Baked\n"
    "Day 2:\nBreakfast: Yogurt: Greek yogurt\nLunch: Soup: Lentil soup\nDinner: Tofu: Stir fried\n"
    "Day 3:\nBreakfast: Toast: Avocado toast\nLunch: Bowl: Rice bowl\nDinner: Pasta: Whole wheat\n"
)


class TestExtractPlan(unittest.TestCase):

    def test_sample_day(self):
        plan = extract_plan(SAMPLE_DAY, 1)
        self.assertEqual(len(plan), 1)
        day = plan[0]
        self.assertEqual(day.day_label, "Monday")
        self.assertEqual(day.breakfast.name, "Oatmeal")
        self.assertEqual(day.breakfast.description, "Warm oats with honey")
        self.assertEqual(day.lunch.name, "Salad")
        self.assertEqual(day.lunch.description, "Greens")
        self.assertEqual(day.dinner.name, "Chicken")
        self.assertEqual(day.dinner.description, "Grilled")
        self.assertEqual(len(day.snacks), 1)
        self.assertEqual(day.snacks[0].name, "Apple")
        self.assertEqual(day.snacks[0].description, "Fresh fruit")

    def test_extracted_entries_get_image_from_name(self):
        day = extract_plan(SAMPLE_DAY, 1)[0]
        self.assertEqual(day.breakfast.image_ref, image_url_for("Oatmeal"))
        self.assertEqual(day.snacks[0].image_ref, image_url_for("Apple"))

    def test_parser_never_sets_macros(self):
        day = extract_plan(SAMPLE_DAY, 1)[0]
        for meal in (day.breakfast, day.lunch, day.dinner) + day.snacks:
            self.assertIsNone(meal.calories)
            self.assertIsNone(meal.protein)
            self.assertIsNone(meal.carbs)
            self.assertIsNone(meal.fats)

    def test_empty_text_gives_default_days(self):
        plan = extract_plan("", 5)
        self.assertEqual(len(plan), 5)
        for i, day in enumerate(plan):
            self.assertEqual(day.day_label, label_for_index(i))
            self.assertEqual(day.breakfast, default_meal("Breakfast"))
            self.assertEqual(day.lunch, default_meal("Lunch"))
            self.assertEqual(day.dinner, default_meal("Dinner"))
            self.assertEqual(day.snacks, ())
            self.assertIsNone(day.breakfast.image_ref)

    def test_text_without_markers_gives_default_days(self):
        plan = extract_plan("Breakfast: Oatmeal: Warm oats\nLunch: Salad: Greens", 2)
        self.assertEqual(len(plan), 2)
        self.assertEqual(plan[0].breakfast, default_meal("Breakfast"))

    def test_length_always_matches_request(self):
        for text in ("", SAMPLE_DAY, THREE_DAYS, "garbage: : :", "Day 1:"):
            for n in (1, 2, 3, 7, 10):
                self.assertEqual(len(extract_plan(text, n)), n)

    def test_same_input_same_result(self):
        self.assertEqual(extract_plan(THREE_DAYS, 4), extract_plan(THREE_DAYS, 4))

    def test_labels_cycle_through_the_week(self):
        plan = extract_plan(THREE_DAYS, 9)
        labels = [d.day_label for d in plan]
        self.assertEqual(labels[:7], ["Monday", "Tuesday", "Wednesday", "Thursday",
                                      "Friday", "Saturday", "Sunday"])
        self.assertEqual(labels[7], "Monday")
        self.assertEqual(labels[8], "Tuesday")

    def test_padding_continues_after_extracted_days(self):
        plan = extract_plan(THREE_DAYS, 5)
        self.assertEqual(plan[2].breakfast.name, "Toast")
        self.assertEqual(plan[3].day_label, "Thursday")
        self.assertEqual(plan[3].breakfast, default_meal("Breakfast"))
        self.assertEqual(plan[4].day_label, "Friday")

    def test_fewer_days_requested_keeps_earliest(self):
        plan = extract_plan(THREE_DAYS, 2)
        self.assertEqual([d.breakfast.name for d in plan], ["Eggs", "Yogurt"])
        self.assertEqual([d.day_label for d in plan], ["Monday", "Tuesday"])

    def test_marker_number_does_not_pick_weekday(self):
        text = "Day 5:\nBreakfast: Eggs: Boiled\nDay 2:\nBreakfast: Toast: Rye\n"
        plan = extract_plan(text, 2)
        self.assertEqual(plan[0].day_label, "Monday")
        self.assertEqual(plan[0].breakfast.name, "Eggs")
        self.assertEqual(plan[1].day_label, "Tuesday")
        self.assertEqual(plan[1].breakfast.name, "Toast")

    def test_missing_dinner_only_defaults_dinner(self):
        text = "Day 1:\nBreakfast: Eggs: Scrambled\nLunch: Wrap: Turkey wrap\nSnacks:\n- Nuts: Almonds\n"
        day = extract_plan(text, 1)[0]
        self.assertEqual(day.breakfast.name, "Eggs")
        self.assertEqual(day.lunch.name, "Wrap")
        self.assertEqual(day.lunch.description, "Turkey wrap")
        self.assertEqual(day.dinner, default_meal("Dinner"))
        self.assertEqual([s.name for s in day.snacks], ["Nuts"])

    def test_back_to_back_markers_each_count_as_a_day(self):
        text = "Day 1:\nDay 2:\nBreakfast: Eggs: Scrambled\n"
        plan = extract_plan(text, 2)
        self.assertEqual([(d.day_label, d.breakfast.name) for d in plan],
                         [("Monday", "Breakfast"), ("Tuesday", "Eggs")])
        self.assertEqual(plan[0].breakfast, default_meal("Breakfast"))

    def test_numbered_meal_lines(self):
        text = "Day 1:\n1. Breakfast: Eggs: Boiled\n2. Lunch: Wrap: Turkey\n3. Dinner: Fish: Baked\n"
        day = extract_plan(text, 1)[0]
        self.assertEqual([day.breakfast.name, day.lunch.name, day.dinner.name],
                         ["Eggs", "Wrap", "Fish"])

    def test_day_without_meals_is_kept(self):
        text = "Day 1:\nRest and hydrate.\nDay 2:\nBreakfast: Eggs: Boiled\n"
        plan = extract_plan(text, 2)
        self.assertEqual(plan[0].day_label, "Monday")
        self.assertEqual(plan[0].breakfast, default_meal("Breakfast"))
        self.assertEqual(plan[0].snacks, ())
        self.assertEqual(plan[1].breakfast.name, "Eggs")

    def test_markers_and_labels_are_case_insensitive(self):
        text = "DAY 1:\nBREAKFAST: Eggs: Fried\nlunch: Wrap: Veggie\nDinner: Soup: Tomato\n"
        day = extract_plan(text, 1)[0]
        self.assertEqual(day.breakfast.name, "Eggs")
        self.assertEqual(day.lunch.name, "Wrap")
        self.assertEqual(day.dinner.name, "Soup")

    def test_default_descriptions_name_the_slot(self):
        day = extract_plan("", 1)[0]
        self.assertEqual(day.breakfast.description, "No breakfast plan provided.")
        self.assertEqual(day.lunch.description, "No lunch plan provided.")
        self.assertEqual(day.dinner.description, "No dinner plan provided.")

    def test_to_dict_shape(self):
        data = extract_plan(SAMPLE_DAY, 1)[0].to_dict()
        self.assertEqual(set(data), {"day_label", "breakfast", "lunch", "dinner", "snacks"})
        self.assertEqual(data["breakfast"]["name"], "Oatmeal")
        self.assertEqual(data["snacks"][0]["description"], "Fresh fruit")
        self.assertIsNone(data["breakfast"]["calories"])


if __name__ == '__main__':
    unittest.main()
