"""Tests for the deposit cap rule (fm_balance.domain.deposit_limit)."""

import pytest

from src.fm_balance.domain.deposit_limit import evaluate_deposit, max_deposit_cents


class TestMaxDeposit:
    def test_quarter_of_unpaid(self) -> None:
        assert max_deposit_cents(20000) == 5000

    def test_no_outstanding_work_means_zero_cap(self) -> None:
        assert max_deposit_cents(0) == 0

    def test_custom_rate(self) -> None:
        assert max_deposit_cents(20000, cap_bps=5000) == 10000

    def test_negative_total_rejected(self) -> None:
        with pytest.raises(ValueError):
            max_deposit_cents(-1)


class TestEvaluateDeposit:
    def test_exactly_at_cap_is_approved(self) -> None:
        # unpaid $200 -> cap $50; deposit $50 allowed
        decision = evaluate_deposit(5000, 20000)
        assert decision.approved is True
        assert decision.max_deposit_cents == 5000

    def test_one_cent_over_cap_is_rejected(self) -> None:
        decision = evaluate_deposit(5001, 20000)
        assert decision.approved is False

    @pytest.mark.parametrize("requested", [1, 100, 5000, 10**9])
    def test_zero_unpaid_rejects_everything(self, requested: int) -> None:
        assert evaluate_deposit(requested, 0).approved is False

    def test_fractional_cap_is_floored(self) -> None:
        # unpaid $201.01 -> cap $50.2525; $50.25 ok, $50.26 not
        assert evaluate_deposit(5025, 20101).approved is True
        assert evaluate_deposit(5026, 20101).approved is False

    @pytest.mark.parametrize("unpaid", [4, 20000, 40300, 123456789])
    def test_cap_boundary_holds_for_any_total(self, unpaid: int) -> None:
        cap = unpaid // 4
        assert evaluate_deposit(cap, unpaid).approved is True
        assert evaluate_deposit(cap + 1, unpaid).approved is False
