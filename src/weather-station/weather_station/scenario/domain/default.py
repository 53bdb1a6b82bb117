"""The built-in demonstration scenario."""

from weather_station.scenario.domain.scenario import Scenario

_DEFAULT = {
    "name": "weather-station-demo",
    "listeners": {
        "phone": {"kind": "phone"},
        "laptop": {"kind": "laptop"},
        "alert": {"kind": "alert"},
    },
    "subscriptions": {
        "temperature": ["phone", "laptop"],
        "condition": ["laptop", "alert"],
    },
    "steps": [
        {"action": "set_temperature", "celsius": 25.0},
        {"action": "set_condition", "condition": "Clear"},
        {"action": "set_temperature", "celsius": 15.0},
        {"action": "set_condition", "condition": "Heavy Rain"},
        {"action": "set_temperature", "celsius": -5.0},
        {"action": "set_condition", "condition": "Snow and Ice"},
        {"action": "set_condition", "condition": "Clear"},
    ],
}


def default_scenario() -> Scenario:
    """Phone (temperature), Laptop (both), Alert (condition), seven updates."""
    return Scenario.model_validate(_DEFAULT)
