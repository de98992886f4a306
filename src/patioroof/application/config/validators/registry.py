"""Registry of the configuration validators run by ``validate_config``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from .base import ValidationResult

if TYPE_CHECKING:
    from patioroof.application.config.schemas import PatioRoofConfiguration

    from .base import Validator

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Named validator instances, each of which can be switched off.

    Validators run in name order so results are stable. A validator that
    raises does not stop the others; the failure is reported as an error on
    the "validation" path.

    Example:
        ValidatorRegistry.disable("advisory")
        result = ValidatorRegistry.validate_all(config)
        ValidatorRegistry.reset_disabled()
    """

    _validators: ClassVar[dict[str, Validator]] = {}
    _disabled: ClassVar[set[str]] = set()

    @classmethod
    def register(cls, validator: Validator) -> None:
        """Register ``validator`` under its name, replacing any previous one."""
        name = validator.name
        if name in cls._validators:
            logger.warning(f"Replacing validator '{name}'")
        cls._validators[name] = validator
        logger.debug(f"Registered validator '{name}' ({type(validator).__name__})")

    @classmethod
    def get(cls, name: str) -> Validator:
        """Look up a validator.

        Raises:
            KeyError: If ``name`` is not registered.
        """
        cls._require(name)
        return cls._validators[name]

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._validators)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._validators

    @classmethod
    def enable(cls, name: str) -> None:
        cls._require(name)
        cls._disabled.discard(name)

    @classmethod
    def disable(cls, name: str) -> None:
        """Skip ``name`` in validate_all() until re-enabled.

        Raises:
            KeyError: If ``name`` is not registered.
        """
        cls._require(name)
        cls._disabled.add(name)

    @classmethod
    def is_enabled(cls, name: str) -> bool:
        return name in cls._validators and name not in cls._disabled

    @classmethod
    def reset_disabled(cls) -> None:
        cls._disabled.clear()

    @classmethod
    def validate_all(cls, config: PatioRoofConfiguration) -> ValidationResult:
        """Run every enabled validator and merge the results."""
        result = ValidationResult()
        for name in cls.available():
            if name in cls._disabled:
                continue
            try:
                result.merge(cls._validators[name].validate(config))
            except Exception as e:
                logger.error(f"Validator '{name}' failed: {e}")
                result.add_error("validation", f"Validator '{name}' failed: {e}")
        return result

    @classmethod
    def validate_single(
        cls, name: str, config: PatioRoofConfiguration
    ) -> ValidationResult:
        """Run one validator, enabled or not.

        Raises:
            KeyError: If ``name`` is not registered.
        """
        return cls.get(name).validate(config)

    @classmethod
    def _require(cls, name: str) -> None:
        if name not in cls._validators:
            available = ", ".join(cls.available()) or "none"
            raise KeyError(
                f"No validator registered with name '{name}'. "
                f"Available validators: {available}"
            )
