"""Load and validate the JSON login scenarios used by data-driven tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from testdata.models import ExpectedResult, LoginScenario, UserCredentials

AUTH_DATA_PATH = Path(__file__).with_name("auth_data.json")
VALIDATION_FIELDS = {"email", "password"}


def _parse_scenario(raw: dict[str, Any], index: int) -> LoginScenario:
    try:
        name = str(raw["name"])
        creds = raw["credentials"]
        credentials = UserCredentials(
            email=str(creds["email"]),
            password=str(creds["password"]),
            remember_me=bool(raw.get("rememberMe", False)),
        )
        expected = ExpectedResult(raw["expectedResult"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Malformed login scenario at index {index}: {exc}") from exc

    expected_error = raw.get("expectedError")
    field = raw.get("field")
    if expected is not ExpectedResult.SUCCESS and not expected_error:
        raise ValueError(f"Scenario {name!r} expects {expected.value} but has no expectedError")
    if expected is ExpectedResult.VALIDATION_ERROR and field not in VALIDATION_FIELDS:
        raise ValueError(
            f"Scenario {name!r} needs field one of {sorted(VALIDATION_FIELDS)}, got {field!r}"
        )
    return LoginScenario(
        name=name,
        credentials=credentials,
        expected_result=expected,
        expected_error=expected_error,
        validation_field=field,
    )


def load_login_scenarios(path: Path | None = None) -> list[LoginScenario]:
    """Read `testScenarios` from the auth data file."""

    source = path or AUTH_DATA_PATH
    data = json.loads(source.read_text(encoding="utf-8"))
    rows = data.get("testScenarios")
    if not isinstance(rows, list):
        raise ValueError(f"{source} has no testScenarios list")
    return [_parse_scenario(row, index) for index, row in enumerate(rows)]
