import unittest

from utils.string import is_blank, truncate


class TestStringUtils(unittest.TestCase):
    def test_truncate(self):
        test_conditions = [
            {
                "value": "International Business Machines",
                "max_length": 20,
                "expected": "International Busine...",
            },
            {
                "value": "Samsung Electronics",
                "max_length": 20,
                "expected": "Samsung Electronics",
            },
            {
                "value": "A" * 20,
                "max_length": 20,
                "expected": "A" * 20,
            },
            {
                "value": "A" * 21,
                "max_length": 20,
                "expected": "A" * 20 + "...",
            },
            {
                "value": "",
                "max_length": 20,
                "expected": "",
            },
        ]

        for condition in test_conditions:
            result = truncate(condition["value"], condition["max_length"])
            self.assertEqual(result, condition["expected"])

    def test_is_blank(self):
        self.assertTrue(is_blank(None))
        self.assertTrue(is_blank(""))
        self.assertTrue(is_blank("  \t\n"))
        self.assertFalse(is_blank(" curved screen "))


if __name__ == "__main__":
    unittest.main()
