"""Named example metric records for demos and smoke tests.

Values are raw form strings, exactly as a caller would submit them. The
healthy presets grade A or A+; the unhealthy presets grade D or F.
"""

from __future__ import annotations

from typing import Any

SCENARIOS: dict[str, dict[str, Any]] = {
    "healthyYoungMale": {
        "label": "Healthy young male",
        "metrics": {
            "age": "25", "sex": "male",
            "a1c": "5.2", "ldl": "80", "hdl": "55", "totalCholesterol": "170",
            "triglycerides": "85", "lpa": "20", "apoB": "70",
            "systolic": "115", "diastolic": "75", "waistHeightRatio": "0.45",
            "vo2Max": "55", "gripStrength": "48",
            "bodyFat": "12", "smm": "41",
        },
    },
    "healthyYoungFemale": {
        "label": "Healthy young female",
        "metrics": {
            "age": "27", "sex": "female",
            "a1c": "5.1", "ldl": "75", "hdl": "65", "totalCholesterol": "175",
            "triglycerides": "80", "lpa": "25", "apoB": "65",
            "systolic": "110", "diastolic": "70", "waistHeightRatio": "0.42",
            "vo2Max": "44", "gripStrength": "31",
            "bodyFat": "16", "smm": "31",
        },
    },
    "healthyMiddleAgedMale": {
        "label": "Healthy middle-aged male",
        "metrics": {
            "age": "45", "sex": "male",
            "a1c": "5.4", "ldl": "90", "hdl": "52", "totalCholesterol": "178",
            "triglycerides": "110", "lpa": "30", "apoB": "78",
            "systolic": "118", "diastolic": "78", "waistHeightRatio": "0.49",
            "vo2Max": "43", "gripStrength": "42",
            "bodyFat": "16", "smm": "40",
        },
    },
    "healthyMiddleAgedFemale": {
        "label": "Healthy middle-aged female",
        "metrics": {
            "age": "44", "sex": "female",
            "a1c": "5.3", "ldl": "85", "hdl": "62", "totalCholesterol": "180",
            "triglycerides": "95", "lpa": "35", "apoB": "75",
            "systolic": "116", "diastolic": "76", "waistHeightRatio": "0.46",
            "vo2Max": "34", "gripStrength": "28",
            "bodyFat": "19", "smm": "29",
        },
    },
    "elderlyHealthyMale": {
        "label": "Healthy senior male",
        "metrics": {
            "age": "68", "sex": "male",
            "a1c": "5.5", "ldl": "88", "hdl": "50", "totalCholesterol": "175",
            "triglycerides": "105", "lpa": "40", "apoB": "78",
            "systolic": "119", "diastolic": "78", "waistHeightRatio": "0.5",
            "vo2Max": "31", "gripStrength": "36",
            "bodyFat": "19", "smm": "38",
        },
    },
    "elderlyHealthyFemale": {
        "label": "Healthy senior female",
        "metrics": {
            "age": "66", "sex": "female",
            "a1c": "5.5", "ldl": "90", "hdl": "60", "totalCholesterol": "180",
            "triglycerides": "100", "lpa": "40", "apoB": "79",
            "systolic": "118", "diastolic": "77", "waistHeightRatio": "0.48",
            "vo2Max": "26", "gripStrength": "25",
            "bodyFat": "23", "smm": "27",
        },
    },
    "athleticMale": {
        "label": "Athletic male",
        "metrics": {
            "age": "32", "sex": "male",
            "a1c": "5.0", "ldl": "65", "hdl": "60", "totalCholesterol": "160",
            "triglycerides": "70", "lpa": "15", "apoB": "60",
            "systolic": "112", "diastolic": "70", "waistHeightRatio": "0.43",
            "vo2Max": "58", "gripStrength": "52",
            "bodyFat": "10", "smm": "44",
        },
    },
    "unhealthyMale": {
        "label": "Unhealthy male",
        "metrics": {
            "age": "52", "sex": "male",
            "a1c": "7.2", "ldl": "175", "hdl": "35", "totalCholesterol": "265",
            "triglycerides": "320", "lpa": "160", "apoB": "130",
            "systolic": "150", "diastolic": "95", "waistHeightRatio": "0.68",
            "vo2Max": "22", "gripStrength": "24",
            "bodyFat": "32", "smm": "28",
        },
    },
    "unhealthyFemale": {
        "label": "Unhealthy female",
        "metrics": {
            "age": "48", "sex": "female",
            "a1c": "6.9", "ldl": "165", "hdl": "40", "totalCholesterol": "255",
            "triglycerides": "260", "lpa": "140", "apoB": "125",
            "systolic": "145", "diastolic": "92", "waistHeightRatio": "0.65",
            "vo2Max": "19", "gripStrength": "12",
            "bodyFat": "38", "smm": "21",
        },
    },
    "sedentaryPerson": {
        "label": "Sedentary adult",
        "metrics": {
            "age": "38", "sex": "male",
            "a1c": "6.0", "ldl": "135", "hdl": "42", "totalCholesterol": "215",
            "triglycerides": "180", "lpa": "70", "apoB": "105",
            "systolic": "132", "diastolic": "85", "waistHeightRatio": "0.58",
            "vo2Max": "31", "gripStrength": "30",
            "bodyFat": "24", "smm": "33",
        },
    },
}


def list_scenarios() -> list[dict[str, str]]:
    """Return ``[{"name", "label"}]`` for every preset, in definition order."""
    return [{"name": name, "label": s["label"]} for name, s in SCENARIOS.items()]


def get_scenario(name: str) -> dict[str, str]:
    """Return a copy of a preset's raw metric record.

    Raises:
        KeyError: If no preset has that name.
    """
    if name not in SCENARIOS:
        raise KeyError(f"Unknown scenario: {name!r}. Valid: {sorted(SCENARIOS)}")
    return dict(SCENARIOS[name]["metrics"])
