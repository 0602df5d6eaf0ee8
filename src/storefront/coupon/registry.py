"""Coupon registry — admin commands, handler, and shopper-facing validation."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Float, String
from protean.utils.globals import current_domain

from storefront.coupon.coupon import Coupon, InvalidCoupon, normalize_code
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Coupon")
class RegisterCoupon:
    """Create a new coupon code. The coupon starts out active."""

    code = String(required=True, max_length=50)
    discount_percent = Float(required=True, min_value=0.0)


@storefront.command(part_of="Coupon")
class SetCouponActive:
    code = String(required=True, max_length=50)
    active = Boolean(required=True)


@storefront.command(part_of="Coupon")
class ToggleCoupon:
    code = String(required=True, max_length=50)


@storefront.command(part_of="Coupon")
class DeleteCoupon:
    """Remove a coupon from the registry. Unknown codes are ignored."""

    code = String(required=True, max_length=50)


def _find(code):
    normalized = normalize_code(code)
    if not normalized:
        return None
    try:
        return current_domain.repository_for(Coupon).get(normalized)
    except ObjectNotFoundError:
        return None


@storefront.command_handler(part_of=Coupon)
class ManageCouponsHandler:
    @handle(RegisterCoupon)
    def register_coupon(self, command):
        if _find(command.code) is not None:
            raise ValidationError({"code": [f"Coupon {normalize_code(command.code)} already exists"]})

        coupon = Coupon.register(code=command.code, discount_percent=command.discount_percent)
        current_domain.repository_for(Coupon).add(coupon)
        logger.info("Coupon registered", code=coupon.code, discount_percent=coupon.discount_percent)
        return coupon.code

    @handle(SetCouponActive)
    def set_coupon_active(self, command):
        repo = current_domain.repository_for(Coupon)
        coupon = repo.get(normalize_code(command.code))
        coupon.set_active(command.active)
        repo.add(coupon)

    @handle(ToggleCoupon)
    def toggle_coupon(self, command):
        repo = current_domain.repository_for(Coupon)
        coupon = repo.get(normalize_code(command.code))
        coupon.toggle()
        repo.add(coupon)
        return coupon.is_active

    @handle(DeleteCoupon)
    def delete_coupon(self, command):
        coupon = _find(command.code)
        if coupon is None:
            return

        current_domain.repository_for(Coupon)._dao.delete(coupon)
        logger.info("Coupon deleted", code=coupon.code)


def validate_coupon(code):
    """Return an ``AppliedCoupon`` for an active coupon, or raise ``InvalidCoupon``."""
    coupon = _find(code)
    if coupon is None or not coupon.is_active:
        raise InvalidCoupon(normalize_code(code))
    return coupon.snapshot()


def list_coupons():
    coupons = current_domain.repository_for(Coupon)._dao.query.all().items
    return sorted(coupons, key=lambda c: c.created_at)
