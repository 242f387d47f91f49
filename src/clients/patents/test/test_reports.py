import random
import unittest

from clients.patents.reports import (
    aggregate,
    assignee_ranking,
    domain_distribution,
    year_series,
)
from typings.patents import GroupCount, PatentRecord, YearCount


def _patent(**kwargs) -> PatentRecord:
    return PatentRecord(**kwargs)


class TestDomainDistribution(unittest.TestCase):
    def test_scenario(self):
        patents = [
            _patent(assignee="A", domain="X"),
            _patent(assignee="A", domain="Y"),
            _patent(assignee="B", domain="X"),
        ]
        result = domain_distribution(patents)
        self.assertEqual(result, [GroupCount("X", 2), GroupCount("Y", 1)])

    def test_first_seen_order(self):
        patents = [
            _patent(domain="Telecom"),
            _patent(domain="Display"),
            _patent(domain="Telecom"),
            _patent(domain="Battery"),
            _patent(domain="Display"),
            _patent(domain="Display"),
        ]
        result = domain_distribution(patents)
        self.assertEqual(
            [g.label for g in result], ["Telecom", "Display", "Battery"]
        )
        self.assertEqual([g.count for g in result], [2, 3, 1])

    def test_missing_domain_is_unknown(self):
        patents = [
            _patent(domain=""),
            PatentRecord.model_validate({"domain": None}),
            _patent(),
            _patent(domain="Display"),
        ]
        result = domain_distribution(patents)
        self.assertEqual(result, [GroupCount("Unknown", 3), GroupCount("Display", 1)])

    def test_counts_sum_to_input_length(self):
        domains = ["A", "B", "C", "", "D"]
        patents = [_patent(domain=random.choice(domains)) for _ in range(57)]
        result = domain_distribution(patents)
        self.assertEqual(sum(g.count for g in result), 57)

    def test_empty(self):
        self.assertEqual(domain_distribution([]), [])


class TestAssigneeRanking(unittest.TestCase):
    def test_scenario(self):
        patents = [
            _patent(assignee="A", domain="X"),
            _patent(assignee="A", domain="Y"),
            _patent(assignee="B", domain="X"),
        ]
        result = assignee_ranking(patents)
        self.assertEqual(result, [GroupCount("A", 2), GroupCount("B", 1)])

    def test_sorted_descending_and_limited(self):
        patents = [
            _patent(assignee=f"Assignee {i}")
            for i in range(15)
            for _ in range(i + 1)
        ]
        result = assignee_ranking(patents)
        self.assertEqual(len(result), 10)
        counts = [g.count for g in result]
        self.assertEqual(counts, sorted(counts, reverse=True))
        self.assertEqual(result[0], GroupCount("Assignee 14", 15))

    def test_ties_keep_first_seen_order(self):
        patents = [
            _patent(assignee="C"),
            _patent(assignee="A"),
            _patent(assignee="B"),
            _patent(assignee="B"),
        ]
        result = assignee_ranking(patents)
        self.assertEqual([g.label for g in result], ["B", "C", "A"])

    def test_label_truncation(self):
        patents = [
            _patent(assignee="Samsung Display Co., Ltd."),
            _patent(assignee="Apple Inc."),
            _patent(assignee="A" * 20),
        ]
        labels = [g.label for g in assignee_ranking(patents)]
        self.assertEqual(labels, ["Samsung Display Co.,...", "Apple Inc.", "A" * 20])

    def test_missing_assignee_is_unknown(self):
        patents = [_patent(), _patent(assignee=""), _patent(assignee="LG")]
        result = assignee_ranking(patents)
        self.assertEqual(result, [GroupCount("Unknown", 2), GroupCount("LG", 1)])

    def test_counts_sum_to_input_length_when_under_limit(self):
        assignees = ["A", "B", "C", "D", ""]
        patents = [_patent(assignee=random.choice(assignees)) for _ in range(40)]
        result = assignee_ranking(patents)
        self.assertEqual(sum(g.count for g in result), 40)

    def test_empty(self):
        self.assertEqual(assignee_ranking([]), [])


class TestYearSeries(unittest.TestCase):
    def test_scenario(self):
        counts = [YearCount(2020, 5), YearCount(2018, 1), YearCount(2019, 3)]
        self.assertEqual(
            year_series(counts),
            [YearCount(2018, 1), YearCount(2019, 3), YearCount(2020, 5)],
        )

    def test_any_permutation(self):
        counts = [YearCount(year, year % 7) for year in range(2004, 2024)]
        for _ in range(10):
            shuffled = random.sample(counts, len(counts))
            years = [c.year for c in year_series(shuffled)]
            self.assertEqual(years, sorted(years))

    def test_does_not_mutate_input(self):
        counts = [YearCount(2020, 5), YearCount(2018, 1)]
        year_series(counts)
        self.assertEqual(counts[0].year, 2020)

    def test_empty(self):
        self.assertEqual(year_series([]), [])


class TestAggregate(unittest.TestCase):
    def test_empty(self):
        summary = aggregate([])
        self.assertEqual(list(summary.domains), [])
        self.assertEqual(list(summary.assignees), [])
        self.assertTrue(summary.is_empty)

    def test_summary(self):
        patents = [
            _patent(assignee="A", domain="X"),
            _patent(assignee="B", domain="X"),
        ]
        summary = aggregate(patents)
        self.assertEqual(list(summary.domains), [GroupCount("X", 2)])
        self.assertEqual(
            list(summary.assignees), [GroupCount("A", 1), GroupCount("B", 1)]
        )
        self.assertFalse(summary.is_empty)


if __name__ == "__main__":
    unittest.main()
