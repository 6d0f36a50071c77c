import unittest

from gvp.aggregate import (
    aggregate,
    count_categories,
    first_text_extractor,
    normalize_counts,
    pie_for_single_record,
    problems_distribution,
    reasons_distribution,
    setting_distribution,
    solution_distribution,
    text_columns_extractor,
    waste_type_distribution,
    who_dispose_distribution,
)
from gvp.taxonomy import SOLUTION_TAXONOMY, make_table

WORDS = [
    "alpha", "bravo", "charlie", "delta", "echo", "foxtrot",
    "golf", "hotel", "india", "juliet", "kilo", "lima",
]


def _names(dist):
    return [row["name"] for row in dist]


class TestNormalizeCounts(unittest.TestCase):

    def test_percentages_sum_to_100(self):
        dist = normalize_counts({"a": 1, "b": 2, "c": 4})
        self.assertAlmostEqual(sum(r["value"] for r in dist), 100.0, places=9)
        self.assertEqual(_names(dist), ["c", "b", "a"])

    def test_zero_counts_dropped_unless_kept(self):
        self.assertEqual(_names(normalize_counts({"a": 0, "b": 3})), ["b"])
        self.assertEqual(_names(normalize_counts({"a": 0, "b": 3}, keep_zero=True)), ["b", "a"])

    def test_empty_total(self):
        self.assertEqual(normalize_counts({"a": 0, "b": 0}), [])
        self.assertEqual(
            normalize_counts({"a": 0, "b": 0}, keep_zero=True),
            [{"name": "a", "value": 0.0}, {"name": "b", "value": 0.0}],
        )
        uniform = normalize_counts({"a": 0, "b": 0, "c": 0, "d": 0}, uniform_when_empty=True)
        self.assertEqual([r["value"] for r in uniform], [25.0] * 4)
        self.assertEqual(normalize_counts({}, uniform_when_empty=True), [])

    def test_ties_keep_declared_order(self):
        dist = normalize_counts({"x": 1, "y": 2, "z": 1})
        self.assertEqual(_names(dist), ["y", "x", "z"])


class TestAggregate(unittest.TestCase):

    def test_raw_values_without_table(self):
        records = [{"k": "a"}, {"k": "b"}, {"k": "a"}, {"k": None}, {}]
        dist = aggregate(records, lambda r: r.get("k"))
        self.assertEqual(_names(dist), ["a", "b"])
        self.assertAlmostEqual(dist[0]["value"], 200 / 3)

    def test_top_n_truncation(self):
        table = make_table("demo", [(f"cat-{w}", [w]) for w in WORDS], default="none")
        records = []
        for i, word in enumerate(WORDS):
            records.extend({"text": word} for _ in range(i + 1))
        full = aggregate(records, lambda r: r["text"], table)
        self.assertEqual(len(full), 12)

        top = aggregate(records, lambda r: r["text"], table, top_n=5)
        self.assertEqual(len(top), 5)
        self.assertEqual(top, full[:5])
        self.assertEqual(_names(top), ["cat-lima", "cat-kilo", "cat-juliet", "cat-india", "cat-hotel"])
        values = [r["value"] for r in top]
        self.assertEqual(values, sorted(values, reverse=True))
        self.assertAlmostEqual(values[0], 100 * 12 / 78)

    def test_results_are_fresh_lists(self):
        records = [{"Bad Odour": 1}]
        first = problems_distribution(records)
        first[0]["value"] = -1
        self.assertEqual(problems_distribution(records)[0]["value"], 100.0)


class TestFlagBreakdowns(unittest.TestCase):

    def test_problems_keep_zero_categories(self):
        records = [{"Bad Odour": 1}, {"Bad Odour": 1, "Mosquitos": True}, {"Congestion": 0}]
        dist = problems_distribution(records)
        self.assertEqual(_names(dist), ["Bad Odour", "Mosquitos", "Stray Animals", "Congestion", "Other"])
        self.assertAlmostEqual(dist[0]["value"], 200 / 3)
        self.assertAlmostEqual(dist[1]["value"], 100 / 3)
        self.assertEqual([r["value"] for r in dist[2:]], [0.0, 0.0, 0.0])

    def test_empty_flag_breakdowns(self):
        self.assertEqual([r["value"] for r in problems_distribution([])], [0.0] * 5)
        self.assertEqual([r["value"] for r in reasons_distribution([])], [0.0] * 6)
        self.assertEqual(waste_type_distribution([]), [])

    def test_reasons_accept_boolean_flags(self):
        dist = reasons_distribution([{"Due To User Fee": True}, {"Due to Narrow Road": 1.0}])
        self.assertEqual(_names(dist[:2]), ["Due To User Fee", "Due to Narrow Road"])
        self.assertEqual(dist[0]["value"], 50.0)

    def test_waste_type_drops_unobserved(self):
        records = [
            {"Organic and Wet Waste": 1, "Clothes Waste": 1},
            {"Organic and Wet Waste": 1},
            {"Carcasses Waste": 0},
        ]
        dist = waste_type_distribution(records)
        self.assertEqual(_names(dist), ["Organic & Wet", "Clothes"])
        self.assertAlmostEqual(sum(r["value"] for r in dist), 100.0, places=9)

    def test_single_record_projection(self):
        record = {"Plastic Paper Glass Waste": 1, "Battery and Bulb Waste": True, "Clothes Waste": 0}
        self.assertEqual(
            pie_for_single_record(record),
            [{"name": "Plastic Paper", "value": 1}, {"name": "Battery & Bulb", "value": 1}],
        )
        self.assertEqual(pie_for_single_record({}), [])


class TestTextBreakdowns(unittest.TestCase):

    def test_who_dispose_observed_only(self):
        records = [
            {"Who Dispose": "street vendor stall"},
            {"Who Dispose": "Colony people"},
            {"Who Dispose": "colony people"},
            {},
        ]
        dist = who_dispose_distribution(records)
        self.assertEqual(_names(dist), ["Nearby Households", "Vendors / Small Stalls", "Unknown / Not Mentioned"])
        self.assertEqual(dist[0]["value"], 50.0)
        self.assertEqual(who_dispose_distribution([]), [])

    def test_who_dispose_top_five(self):
        texts = ["colony people", "vendor", "visitor", "vehicle", "mixed", "construction", "showroom"]
        records = [{"Who Dispose": t} for t in texts]
        dist = who_dispose_distribution(records)
        self.assertEqual(len(dist), 5)
        self.assertEqual(len(who_dispose_distribution(records, top_n=None)), 7)

    def test_setting_falls_back_across_columns(self):
        records = [
            {"In_what_setting_is_the_GVP_pre": "drain"},
            {"In_what_setting_is_the_GVP_pre": "", "Location Type": "colony"},
            {"other": "something odd"},
        ]
        dist = setting_distribution(records)
        self.assertEqual(_names(dist), ["Residential Area", "Nallah / Drain", "Other / Miscellaneous"])

    def test_first_text_extractor(self):
        extract = first_text_extractor(["a", "b"])
        self.assertEqual(extract({"a": "  ", "b": "x"}), "x")
        self.assertEqual(extract({}), "")

    def test_multi_column_scan(self):
        record = {"col1": "More Bins", "col2": "N/A", "col3": ""}
        counts = count_categories(
            [record],
            text_columns_extractor(["col1", "col2", "col3"]),
            SOLUTION_TAXONOMY,
            categories=SOLUTION_TAXONOMY.categories,
        )
        self.assertEqual(sum(counts.values()), 1)
        self.assertEqual(counts["Bins and Facilites"], 1)

    def test_solution_counts_every_column(self):
        record = {
            "Solution Suggested by Interviewee1": "More Bins",
            "Solution Suggested by Interviewee2": "Strict Fines",
            "Solution Suggested by Interviewee3": " N/A ",
        }
        dist = solution_distribution([record])
        self.assertEqual(len(dist), 8)
        self.assertEqual(_names(dist[:2]), ["Bins and Facilites", "Strict Enforcement Measures "])
        self.assertEqual(dist[0]["value"], 50.0)
        self.assertEqual(dist[2]["value"], 0.0)

    def test_solution_zero_data_fallback(self):
        dist = solution_distribution([])
        self.assertEqual(len(dist), 8)
        self.assertEqual(_names(dist), list(SOLUTION_TAXONOMY.categories))
        for row in dist:
            self.assertEqual(row["value"], 12.5)

    def test_unmatched_solutions_are_not_counted(self):
        dist = solution_distribution([{"Solution Suggested by Interviewee1": "plant trees"}])
        self.assertEqual([r["value"] for r in dist], [12.5] * 8)


if __name__ == "__main__":
    unittest.main()
