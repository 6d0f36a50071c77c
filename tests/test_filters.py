import unittest

from gvp.filters import DashboardFilters, normalize_filters


class TestNormalizeFilters(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual(normalize_filters({}), DashboardFilters())

    def test_wards_are_strings_and_deduplicated(self):
        f = normalize_filters({"selected_wards": [12, "13", 12.0, None, " 14 "]})
        self.assertEqual(f.selected_wards, ["12", "13", "14"])

    def test_unknown_wards_dropped(self):
        f = normalize_filters({"selected_wards": ["12", "99"]}, available_wards=["12", "13"])
        self.assertEqual(f.selected_wards, ["12"])

    def test_bad_numbers_fall_back(self):
        f = normalize_filters({"top_n": "many", "table_limit": 10_000, "selected_point": "x"})
        self.assertEqual(f.top_n, 5)
        self.assertEqual(f.table_limit, 500)
        self.assertIsNone(f.selected_point)
        self.assertIsNone(normalize_filters({"selected_point": -1}).selected_point)
        self.assertEqual(normalize_filters({"selected_point": "3"}).selected_point, 3)
        self.assertEqual(normalize_filters({"top_n": 0}).top_n, 1)


if __name__ == "__main__":
    unittest.main()
