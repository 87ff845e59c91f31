"""
JSON contracts for TimeValue and TimeSpan

Dict form used by calendar stores and free/busy services outside Python.
Schemas (Draft 2020-12) ship in schema/ next to this module.

Zones travel as their identifier ('tzid'); decoding resolves them through a
ZoneRegistry, which keeps ownership of the zone objects.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from jsonschema import Draft202012Validator

from caltime.core.domain.time_span import TimeSpan
from caltime.core.domain.time_value import TimeValue
from caltime.core.domain.zone import ZoneRegistry, default_registry

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schema"


@lru_cache(maxsize=None)
def contract_validator(name: str) -> Draft202012Validator:
    """
    Validator for schema/<name>.json, built once per name.

    Raises:
        FileNotFoundError: No such schema
        jsonschema.SchemaError: The file is not a valid schema
    """
    with open(SCHEMA_DIR / f"{name}.json", "r", encoding="utf-8") as f:
        schema = json.load(f)
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def validate_time_value(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: data is not a time_value contract
    """
    contract_validator("time_value").validate(data)


def validate_time_span(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: data is not a time_span contract
    """
    contract_validator("time_span").validate(data)


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def time_value_to_contract(value: TimeValue) -> Dict[str, Any]:
    """Contract dict for a TimeValue (zone reduced to its tzid)."""
    data = value.model_dump(exclude={"zone"})
    data["tzid"] = value.get_zone_identifier()
    return data


def time_value_from_contract(
    data: Dict[str, Any], registry: Optional[ZoneRegistry] = None
) -> TimeValue:
    """
    TimeValue from a contract dict.

    Args:
        data: Dict matching time_value.json
        registry: Zone resolver (default: process-wide registry)

    Returns:
        TimeValue; the null sentinel if the tzid is unknown

    Raises:
        jsonschema.ValidationError: data does not match the schema
    """
    validate_time_value(data)
    if registry is None:
        registry = default_registry()

    zone = None
    tzid = data["tzid"]
    if tzid is not None:
        zone = registry.get(tzid)
        if zone is None:
            logger.warning("Unknown tzid %r in time_value contract", tzid)
            return TimeValue.null_date() if data["is_date"] else TimeValue.null_time()

    fields = {key: val for key, val in data.items() if key != "tzid"}
    return TimeValue(**fields, zone=zone)


def time_span_to_contract(span: TimeSpan) -> Dict[str, Any]:
    return span.model_dump()


def time_span_from_contract(data: Dict[str, Any]) -> TimeSpan:
    """
    Raises:
        jsonschema.ValidationError: data does not match the schema
    """
    validate_time_span(data)
    return TimeSpan(**data)
