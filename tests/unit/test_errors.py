"""Tests for fm_common.errors and fm_common.response."""

from src.fm_common.errors import (
    AppError,
    DepositLimitExceededError,
    ForbiddenError,
    InsufficientFundsError,
    InternalError,
    InvalidAmountError,
    JobAlreadyPaidError,
    JobNotFoundError,
    ProfileNotFoundError,
)
from src.fm_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500
        assert err.data is None

    def test_custom_http_status(self) -> None:
        err = AppError(code=1002, message="nope", http_status=403)
        assert err.http_status == 403

    def test_is_exception(self) -> None:
        err = AppError(code=1002, message="test")
        assert isinstance(err, Exception)


class TestSpecificErrors:
    def test_forbidden(self) -> None:
        err = ForbiddenError("only clients can pay for jobs")
        assert err.code == 1002
        assert err.http_status == 403
        assert "only clients" in err.message

    def test_profile_not_found(self) -> None:
        err = ProfileNotFoundError(42)
        assert err.code == 1003
        assert err.http_status == 404

    def test_insufficient_funds(self) -> None:
        err = InsufficientFundsError(required=20100, available=130)
        assert err.code == 2001
        assert err.http_status == 422
        assert "20100" in err.message
        assert "130" in err.message

    def test_invalid_amount(self) -> None:
        err = InvalidAmountError("must be positive")
        assert err.code == 2002
        assert err.http_status == 422

    def test_deposit_limit_carries_cap(self) -> None:
        err = DepositLimitExceededError(5001, 5000, "$50.00")
        assert err.code == 2003
        assert err.http_status == 422
        assert err.max_allowed == 5000
        assert err.data == {
            "requested_cents": 5001,
            "max_deposit_cents": 5000,
            "max_deposit_display": "$50.00",
        }
        assert "$50.00" in err.message

    def test_job_not_found(self) -> None:
        err = JobNotFoundError(7)
        assert err.code == 3001
        assert err.http_status == 404

    def test_job_already_paid(self) -> None:
        err = JobAlreadyPaidError(7)
        assert err.code == 3002
        assert err.http_status == 409

    def test_internal(self) -> None:
        err = InternalError()
        assert err.code == 9002
        assert err.http_status == 500


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"id": 1})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"id": 1}

    def test_error(self) -> None:
        resp = error_response(2001, "Insufficient balance")
        assert resp.code == 2001
        assert resp.message == "Insufficient balance"
        assert resp.data is None

    def test_error_with_data(self) -> None:
        resp = error_response(2003, "limit", {"max_deposit_cents": 5000})
        assert resp.data == {"max_deposit_cents": 5000}

    def test_serialization(self) -> None:
        d = ApiResponse().model_dump()
        assert set(d) == {"code", "message", "data", "timestamp", "request_id"}
        assert d["request_id"].startswith("req_")
