"""Validation Result — verifies the two-variant sum type."""

import dataclasses

import pytest

from parity_api.core.validation_result import Ok, Problem, ValidationResult, is_ok


def test_is_ok_distinguishes_variants():
    assert is_ok(Ok("Valid ID")) is True
    assert is_ok(Problem("Invalid Id")) is False


def test_variants_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Ok("Valid ID").message = "changed"
    with pytest.raises(dataclasses.FrozenInstanceError):
        Problem("Invalid Id").detail = "changed"


def test_variants_compare_by_value_and_type():
    assert Ok("x") == Ok("x")
    assert Ok("x") != Problem("x")


def test_validation_result_union_admits_both_variants_only():
    assert isinstance(Ok("Valid ID"), ValidationResult)
    assert isinstance(Problem("Invalid Id"), ValidationResult)
    assert not isinstance("Valid ID", ValidationResult)
