# tests/fixtures/api_responses.py
"""
Sample exchangerate.host responses for the client tests.
"""

RATES_RESPONSES = {
    "single_rate_success": {
        "base": "EUR",
        "date": "2024-03-15",
        "rates": {
            "GBP": 0.85,
        }
    },

    "all_rates_success": {
        "base": "EUR",
        "date": "2024-03-15",
        "rates": {
            "AUD": 1.566015,
            "CAD": 1.560132,
            "CHF": 1.154727,
            "GBP": 0.882047,
            "JPY": 132.360679,
            "USD": 1.23396,
        }
    },

    "base_only": {
        "base": "EUR",
        "date": "2024-03-15",
        "rates": {
            "EUR": 1.0,
        }
    },

    "historical_success": {
        "base": "EUR",
        "start_at": "2024-01-01",
        "end_at": "2024-01-03",
        "rates": {
            "2024-01-03": {"GBP": 0.866, "USD": 1.092},
            "2024-01-01": {"GBP": 0.867, "USD": 1.105},
            "2024-01-02": {"GBP": 0.868, "USD": 1.094},
        }
    },

    "missing_rates": {
        "base": "EUR",
        "date": "2024-03-15",
    },

    "non_numeric_rates": {
        "base": "EUR",
        "rates": {
            "GBP": "not-a-number",
        }
    },

    "api_error": {
        "success": False,
        "error": {
            "code": 101,
            "info": "You have not supplied a valid API Access Key."
        }
    },
}
