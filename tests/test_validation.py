from decimal import Decimal

import base58
import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from solana_quick_wallet.validation import (
    AddressValidator,
    AmountValidator,
    PrivateKeyValidator,
    ValidationResult,
)


class TestValidationResult:
    def test_valid_result(self):
        result = ValidationResult(is_valid=True, normalized_value=123)
        assert result.is_valid is True
        assert result.error_message is None
        assert result.normalized_value == 123

    def test_invalid_result(self):
        result = ValidationResult(is_valid=False, error_message="Test error")
        assert result.is_valid is False
        assert result.error_message == "Test error"
        assert result.normalized_value is None


class TestAddressValidator:
    def test_valid_address(self):
        pubkey = Keypair().pubkey()
        result = AddressValidator.validate(str(pubkey))
        assert result.is_valid is True
        assert result.normalized_value == pubkey

    def test_strips_whitespace(self):
        pubkey = Pubkey.new_unique()
        result = AddressValidator.validate(f"  {pubkey}  ")
        assert result.is_valid is True
        assert result.normalized_value == pubkey

    @pytest.mark.parametrize("value", ["", "   ", None, 42])
    def test_missing_address(self, value):
        result = AddressValidator.validate(value)
        assert result.is_valid is False
        assert "required" in result.error_message.lower()

    @pytest.mark.parametrize("value", ["TokenX", "0OIl0OIl", "abc"])
    def test_malformed_address(self, value):
        result = AddressValidator.validate(value)
        assert result.is_valid is False
        assert "base58" in result.error_message.lower()


class TestPrivateKeyValidator:
    def test_valid_private_key(self):
        keypair = Keypair()
        encoded = base58.b58encode(bytes(keypair)).decode("ascii")
        result = PrivateKeyValidator.validate(encoded)
        assert result.is_valid is True
        assert result.normalized_value == bytes(keypair)

    def test_empty_private_key(self):
        result = PrivateKeyValidator.validate("")
        assert result.is_valid is False
        assert "required" in result.error_message.lower()

    def test_invalid_characters(self):
        result = PrivateKeyValidator.validate("0OIl")
        assert result.is_valid is False
        assert "base58" in result.error_message.lower()

    def test_wrong_length(self):
        encoded = base58.b58encode(b"\x02" * 32).decode("ascii")
        result = PrivateKeyValidator.validate(encoded)
        assert result.is_valid is False
        assert "64 bytes" in result.error_message


class TestAmountValidatorParseAmount:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, Decimal("1")),
            (2.5, Decimal("2.5")),
            (Decimal("0.000000001"), Decimal("0.000000001")),
            (" 3 ", Decimal("3")),
        ],
    )
    def test_valid_amounts(self, value, expected):
        result = AmountValidator.parse_amount(value)
        assert result.is_valid is True
        assert result.normalized_value == expected

    def test_float_keeps_short_representation(self):
        result = AmountValidator.parse_amount(0.1)
        assert result.normalized_value == Decimal("0.1")

    @pytest.mark.parametrize("value", [None, "", "   ", True, False])
    def test_missing_amount(self, value):
        result = AmountValidator.parse_amount(value)
        assert result.is_valid is False
        assert "required" in result.error_message.lower()

    @pytest.mark.parametrize("value", [0, -1, -0.5, "0", "-10", Decimal("-3")])
    def test_non_positive_amount(self, value):
        result = AmountValidator.parse_amount(value)
        assert result.is_valid is False
        assert "greater than zero" in result.error_message.lower()

    @pytest.mark.parametrize(
        "value", [float("nan"), float("inf"), float("-inf"), "NaN", "Infinity"]
    )
    def test_non_finite_amount(self, value):
        result = AmountValidator.parse_amount(value)
        assert result.is_valid is False
        assert "finite" in result.error_message.lower()

    def test_not_a_number(self):
        result = AmountValidator.parse_amount("abc")
        assert result.is_valid is False
        assert "valid number" in result.error_message.lower()

    @pytest.mark.parametrize("value", ["1,5", "1,000.5", "1 000", "2.5 SOL"])
    def test_separators_are_rejected(self, value):
        """Test that comma and space separators are not stripped"""
        result = AmountValidator.parse_amount(value)
        assert result.is_valid is False
        assert "valid number" in result.error_message.lower()

    def test_unsupported_type(self):
        result = AmountValidator.parse_amount([1])
        assert result.is_valid is False


class TestAmountValidatorDecimalPlaces:
    def test_within_decimals(self):
        result = AmountValidator.validate_decimal_places(Decimal("2.5"), 6)
        assert result.is_valid is True

    def test_trailing_zeros_ignored(self):
        result = AmountValidator.validate_decimal_places(Decimal("2.500000000"), 1)
        assert result.is_valid is True

    def test_too_many_decimals(self):
        result = AmountValidator.validate_decimal_places(Decimal("1.1234567"), 6)
        assert result.is_valid is False
        assert "Maximum 6" in result.error_message

    def test_zero_decimals(self):
        result = AmountValidator.validate_decimal_places(Decimal("1.5"), 0)
        assert result.is_valid is False
        assert "decimals: 0" in result.error_message


class TestAmountValidatorBaseUnits:
    def test_token_conversion(self):
        result = AmountValidator.convert_to_base_units(Decimal("2.5"), 6)
        assert result.is_valid is True
        assert result.normalized_value == 2_500_000

    def test_sol_conversion(self):
        result = AmountValidator.convert_to_base_units(Decimal("5"), 9)
        assert result.normalized_value == 5_000_000_000

    def test_exceeds_u64(self):
        result = AmountValidator.convert_to_base_units(Decimal("18446744074"), 9)
        assert result.is_valid is False
        assert "maximum" in result.error_message.lower()

    def test_validate_full(self):
        result = AmountValidator.validate_full("0.000000001", 9)
        assert result.is_valid is True
        assert result.normalized_value == 1

    def test_validate_full_rejects_dust(self):
        result = AmountValidator.validate_full("0.0000000001", 9)
        assert result.is_valid is False
