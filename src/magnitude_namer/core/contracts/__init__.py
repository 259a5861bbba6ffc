"""
Contract Validation Module

Модуль для валидации JSON контрактов magnitude_namer.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    contract_validator,
    validate_magnitude_batch,
    validate_magnitude_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "contract_validator",
    "validate_magnitude_record",
    "validate_magnitude_batch",
]
