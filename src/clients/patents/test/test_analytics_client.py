import unittest
from unittest.mock import MagicMock, patch
import requests

from clients.patents.analytics_client import yearwise_counts
from constants.core import PATENT_API_URL
from typings.client import ErrorKind
from typings.patents import YearCount


def _response(body) -> MagicMock:
    response = MagicMock()
    response.json.return_value = body
    return response


class TestAnalyticsClient(unittest.TestCase):
    @patch("clients.patents.http.requests.get")
    def test_yearwise_counts_sorted(self, mock_get):
        mock_get.return_value = _response(
            [
                {"year": 2020, "count": 5},
                {"year": 2018, "count": 1},
                {"year": 2019, "count": 3},
            ]
        )

        result = yearwise_counts("android mobile", 3)

        self.assertTrue(result.ok)
        self.assertEqual(
            result.value,
            [YearCount(2018, 1), YearCount(2019, 3), YearCount(2020, 5)],
        )
        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], f"{PATENT_API_URL}/yearwise_count")
        self.assertEqual(
            kwargs["params"], {"no_of_years": 3, "keyword": "android mobile"}
        )

    @patch("clients.patents.http.requests.get")
    def test_number_of_years_passed_through(self, mock_get):
        mock_get.return_value = _response([])
        yearwise_counts("oled", 50)
        _, kwargs = mock_get.call_args
        self.assertEqual(kwargs["params"]["no_of_years"], 50)

    @patch("clients.patents.http.requests.get")
    def test_numeric_strings(self, mock_get):
        mock_get.return_value = _response([{"year": "2021", "count": "7"}])
        result = yearwise_counts("oled", 1)
        self.assertEqual(result.value, [YearCount(2021, 7)])

    @patch("clients.patents.http.requests.get")
    def test_integral_floats(self, mock_get):
        mock_get.return_value = _response([{"year": 2021.0, "count": 7.0}])
        result = yearwise_counts("oled", 1)
        self.assertEqual(result.value, [YearCount(2021, 7)])

    @patch("clients.patents.http.requests.get")
    def test_blank_keyword_issues_no_request(self, mock_get):
        result = yearwise_counts("  ", 5)
        self.assertTrue(result.skipped)
        self.assertEqual(result.value, [])
        mock_get.assert_not_called()

    @patch("clients.patents.http.requests.get")
    def test_transport_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("connection refused")

        with self.assertLogs("clients.patents.analytics_client", level="ERROR"):
            result = yearwise_counts("oled", 5)

        self.assertEqual(result.error, ErrorKind.TRANSPORT)
        self.assertEqual(result.value, [])

    @patch("clients.patents.http.requests.get")
    def test_parse_errors(self, mock_get):
        test_conditions = [
            {"response": []},
            [{"year": 2020}],
            [{"year": "last year", "count": 1}],
            [{"year": 2020.7, "count": 1}],
            [{"year": True, "count": 1}],
            [{"year": 2020, "count": None}],
            [2020, 2021],
            None,
        ]

        for body in test_conditions:
            mock_get.return_value = _response(body)
            result = yearwise_counts("oled", 5)
            self.assertEqual(result.error, ErrorKind.PARSE)
            self.assertEqual(result.value, [])


if __name__ == "__main__":
    unittest.main()
