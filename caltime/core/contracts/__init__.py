"""
Contract Validation Module

JSON interchange contracts for TimeValue and TimeSpan.
"""

from .validators import (
    contract_validator,
    time_span_from_contract,
    time_span_to_contract,
    time_value_from_contract,
    time_value_to_contract,
    validate_time_span,
    validate_time_value,
)

__all__ = [
    # Validation
    "contract_validator",
    "validate_time_value",
    "validate_time_span",
    # Encode / decode
    "time_value_to_contract",
    "time_value_from_contract",
    "time_span_to_contract",
    "time_span_from_contract",
]
