"""Input validation utilities for addresses, private keys and transfer amounts."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

import base58
from solders.pubkey import Pubkey


@dataclass
class ValidationResult:
    is_valid: bool
    error_message: str | None = None
    normalized_value: Any = None


class AddressValidator:
    @staticmethod
    def validate(value: Any) -> ValidationResult:
        if not isinstance(value, str) or not value.strip():
            return ValidationResult(
                is_valid=False,
                error_message="Address is required",
            )

        try:
            pubkey = Pubkey.from_string(value.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message="Address is not a valid base58 public key",
            )

        return ValidationResult(
            is_valid=True,
            normalized_value=pubkey,
        )


class PrivateKeyValidator:
    SECRET_KEY_LENGTH = 64

    @staticmethod
    def validate(value: Any) -> ValidationResult:
        if not isinstance(value, str) or not value.strip():
            return ValidationResult(
                is_valid=False,
                error_message="Private key is required",
            )

        try:
            secret = base58.b58decode(value.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message="Private key is not valid base58",
            )

        if len(secret) != PrivateKeyValidator.SECRET_KEY_LENGTH:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Private key must decode to {PrivateKeyValidator.SECRET_KEY_LENGTH} bytes"
                ),
            )

        return ValidationResult(
            is_valid=True,
            normalized_value=secret,
        )


class AmountValidator:
    MAX_BASE_UNITS = 18_446_744_073_709_551_615

    @staticmethod
    def parse_amount(value: Any) -> ValidationResult:
        if value is None or isinstance(value, bool):
            return ValidationResult(
                is_valid=False,
                error_message="Amount is required",
            )

        if isinstance(value, str):
            # No separator rewriting: "1,5" must not become 15.
            raw_amount = value.strip()
            if not raw_amount:
                return ValidationResult(
                    is_valid=False,
                    error_message="Amount is required",
                )
        elif isinstance(value, (int, float, Decimal)):
            # str() keeps 2.5 as Decimal("2.5") instead of its binary expansion
            raw_amount = str(value)
        else:
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be a number",
            )

        try:
            amount_decimal = Decimal(raw_amount)
        except (InvalidOperation, ValueError):
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be a valid number",
            )

        if not amount_decimal.is_finite():
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be a finite number",
            )

        if amount_decimal <= 0:
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be greater than zero",
            )

        return ValidationResult(
            is_valid=True,
            normalized_value=amount_decimal,
        )

    @staticmethod
    def validate_decimal_places(amount: Decimal, decimals: int) -> ValidationResult:
        exponent = amount.normalize().as_tuple().exponent
        if not isinstance(exponent, int):
            return ValidationResult(
                is_valid=False,
                error_message="Invalid numeric format",
            )

        decimal_places = max(0, -exponent)
        if decimal_places > decimals:
            if decimals == 0:
                return ValidationResult(
                    is_valid=False,
                    error_message="This token does not support decimal amounts (decimals: 0)",
                )
            return ValidationResult(
                is_valid=False,
                error_message=f"Too many decimal places. Maximum {decimals} allowed",
            )

        return ValidationResult(is_valid=True)

    @staticmethod
    def convert_to_base_units(amount: Decimal, decimals: int) -> ValidationResult:
        try:
            scale = Decimal(10) ** decimals
            base_units = int(amount * scale)
        except (TypeError, ValueError, ArithmeticError):
            return ValidationResult(
                is_valid=False,
                error_message="Failed to convert amount to base units",
            )

        if base_units <= 0:
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be greater than zero",
            )

        if base_units > AmountValidator.MAX_BASE_UNITS:
            return ValidationResult(
                is_valid=False,
                error_message="Amount exceeds maximum allowed value",
            )

        return ValidationResult(
            is_valid=True,
            normalized_value=base_units,
        )

    @classmethod
    def validate_full(cls, value: Any, decimals: int) -> ValidationResult:
        parse_result = cls.parse_amount(value)
        if not parse_result.is_valid:
            return parse_result

        amount = parse_result.normalized_value

        decimal_result = cls.validate_decimal_places(amount, decimals)
        if not decimal_result.is_valid:
            return decimal_result

        return cls.convert_to_base_units(amount, decimals)
