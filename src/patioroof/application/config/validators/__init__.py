"""Validators for quote configurations.

- DomainValidator: domain invariants and price availability (errors)
- AdvisoryValidator: gutter height, pitch and billing size advisories (warnings)

Both are registered with the ValidatorRegistry on import.
"""

from .advisory import AdvisoryValidator
from .base import Severity, ValidationIssue, ValidationResult, Validator
from .domain import DomainValidator
from .registry import ValidatorRegistry

for _validator in (DomainValidator(), AdvisoryValidator()):
    if not ValidatorRegistry.is_registered(_validator.name):
        ValidatorRegistry.register(_validator)
del _validator

__all__ = [
    # Base classes
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "Validator",
    # Registry
    "ValidatorRegistry",
    # Validators
    "AdvisoryValidator",
    "DomainValidator",
]
