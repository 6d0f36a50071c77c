import unittest

from gvp.classify import classify, is_flag_set, normalize_text
from gvp.taxonomy import (
    DISPOSAL_TAXONOMY,
    SETTING_TAXONOMY,
    SOLUTION_TAXONOMY,
    make_table,
)


class TestClassify(unittest.TestCase):

    def test_same_input_same_category(self):
        for text in ["street vendor stall", "colony people", "", None, "random text"]:
            self.assertEqual(classify(text, DISPOSAL_TAXONOMY), classify(text, DISPOSAL_TAXONOMY))

    def test_earlier_entry_wins(self):
        # "vendor" (Vendors / Small Stalls) is declared before "market" and "stall"
        # of Market / Vendor Community.
        self.assertEqual(classify("street vendor stall", DISPOSAL_TAXONOMY), "Vendors / Small Stalls")
        self.assertEqual(classify("Road side near school", SETTING_TAXONOMY), "School / Institution")

    def test_case_and_whitespace_are_ignored(self):
        self.assertEqual(classify("   COLONY PEOPLE  ", DISPOSAL_TAXONOMY), "Nearby Households")
        self.assertEqual(classify("Market_Place", SETTING_TAXONOMY), "Market / Commercial Area")

    def test_multilingual_keywords(self):
        self.assertEqual(classify("जवळ पास लोक", DISPOSAL_TAXONOMY), "Nearby Households")
        self.assertEqual(classify("नदी", SETTING_TAXONOMY), "Water Body / Lake Area")

    def test_missing_text_uses_default(self):
        self.assertEqual(classify(None, DISPOSAL_TAXONOMY), "Unknown / Not Mentioned")
        self.assertEqual(classify("", DISPOSAL_TAXONOMY), "Unknown / Not Mentioned")
        self.assertEqual(classify(None, SETTING_TAXONOMY), "Other / Miscellaneous")
        self.assertEqual(classify(float("nan"), SETTING_TAXONOMY), "Other / Miscellaneous")

    def test_solution_without_match_has_no_category(self):
        self.assertIsNone(classify("plant trees", SOLUTION_TAXONOMY))
        self.assertIsNone(classify(None, SOLUTION_TAXONOMY))
        self.assertEqual(classify("More Bins", SOLUTION_TAXONOMY), "Bins and Facilites")
        self.assertEqual(classify("Nothing to say", SOLUTION_TAXONOMY), "Neutral Feedback")
        self.assertEqual(
            classify("Surveillance Camera at that Place", SOLUTION_TAXONOMY), "Technology-Enabled Monitoring"
        )

    def test_custom_table(self):
        table = make_table("demo", [("Dogs", ["dog", "puppy"]), ("Animals", ["dog", "cat"])], default="Other")
        self.assertEqual(classify("A PUPPY", table), "Dogs")
        self.assertEqual(classify("hot dog stand", table), "Dogs")
        self.assertEqual(classify("cat", table), "Animals")
        self.assertEqual(classify("bird", table), "Other")
        self.assertEqual(table.categories, ("Dogs", "Animals", "Other"))

    def test_table_categories(self):
        self.assertEqual(len(DISPOSAL_TAXONOMY.categories), 12)
        self.assertEqual(len(SETTING_TAXONOMY.categories), 9)
        self.assertEqual(len(SOLUTION_TAXONOMY.categories), 8)


class TestHelpers(unittest.TestCase):

    def test_normalize_text(self):
        self.assertEqual(normalize_text("  Hello World "), "hello world")
        self.assertEqual(normalize_text(None), "")
        self.assertEqual(normalize_text(12), "12")

    def test_is_flag_set(self):
        for value in [1, 1.0, True, "1", "true", "TRUE"]:
            self.assertTrue(is_flag_set(value), value)
        for value in [0, 0.0, False, None, "", "0", "no", 2]:
            self.assertFalse(is_flag_set(value), value)


if __name__ == "__main__":
    unittest.main()
