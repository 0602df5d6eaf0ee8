"""Tests for the Coupon aggregate."""

import pytest
from protean.exceptions import ValidationError
from storefront.coupon.coupon import (
    INVALID_COUPON_MESSAGE,
    Coupon,
    InvalidCoupon,
    normalize_code,
)
from storefront.coupon.events import CouponActivated, CouponDeactivated, CouponRegistered


class TestNormalizeCode:
    def test_upper_cases_and_trims(self):
        assert normalize_code("  welcome10 ") == "WELCOME10"

    def test_none_is_empty(self):
        assert normalize_code(None) == ""


class TestRegister:
    def test_register_normalizes_code(self):
        coupon = Coupon.register(code="save20", discount_percent=20)
        assert coupon.code == "SAVE20"
        assert coupon.discount_percent == 20
        assert coupon.is_active is True

    def test_register_raises_event(self):
        coupon = Coupon.register(code="SAVE20", discount_percent=20)
        events = [e for e in coupon._events if isinstance(e, CouponRegistered)]
        assert len(events) == 1
        assert events[0].code == "SAVE20"

    def test_above_hundred_percent_is_accepted(self):
        coupon = Coupon.register(code="MEGA", discount_percent=150)
        assert coupon.discount_percent == 150

    def test_blank_code_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Coupon.register(code="  ", discount_percent=10)
        assert "code" in exc_info.value.messages

    def test_negative_percent_rejected(self):
        with pytest.raises(ValidationError):
            Coupon.register(code="BAD", discount_percent=-5)


class TestActivation:
    def _coupon(self):
        coupon = Coupon.register(code="SAVE20", discount_percent=20)
        coupon._events.clear()
        return coupon

    def test_deactivate(self):
        coupon = self._coupon()
        coupon.set_active(False)
        assert coupon.is_active is False
        assert isinstance(coupon._events[-1], CouponDeactivated)

    def test_reactivate(self):
        coupon = self._coupon()
        coupon.set_active(False)
        coupon.set_active(True)
        assert coupon.is_active is True
        assert isinstance(coupon._events[-1], CouponActivated)

    def test_setting_same_state_is_noop(self):
        coupon = self._coupon()
        coupon.set_active(True)
        assert coupon._events == []

    def test_toggle_flips(self):
        coupon = self._coupon()
        coupon.toggle()
        assert coupon.is_active is False
        coupon.toggle()
        assert coupon.is_active is True


class TestSnapshot:
    def test_snapshot_copies_code_and_percent(self):
        coupon = Coupon.register(code="SAVE20", discount_percent=20)
        applied = coupon.snapshot()
        assert applied.code == "SAVE20"
        assert applied.discount_percent == 20


class TestInvalidCoupon:
    def test_carries_code_and_message(self):
        exc = InvalidCoupon("NOPE")
        assert exc.code == "NOPE"
        assert exc.messages == {"coupon_code": [INVALID_COUPON_MESSAGE]}

    def test_is_a_validation_error(self):
        assert isinstance(InvalidCoupon("NOPE"), ValidationError)
