"""
Pre-write checks for entities.

Each ``validate_*`` function inspects an entity and returns the list of
problems found, empty when the entity may be written.  Services call
``ensure_valid`` on the result right before handing the entity to a
repository, so nothing invalid reaches the database.  Checks that need
the database (referenced records must exist) are added by the services
through ``check_reference``.

Date checks compare against ``date.today()``.
"""

import math
from datetime import date
from typing import Any, List, Optional

from ..core.exceptions import FieldError, InvalidRecordError
from ..models.auction import Auction
from ..models.comic import Comic
from ..models.comic_copy import ComicCopy
from ..models.order import Order
from ..models.order_detail import OrderDetail
from ..models.subscription import Subscription
from ..models.user import User
from ..models.wishlist import Wishlist
from ..repositories.base import Repository, SQLITE_MAX_INTEGER


def _require(errors: List[FieldError], field: str, value: Any) -> bool:
    if value is None:
        errors.append(FieldError(field, "must not be null"))
        return False
    return True


def _require_text(errors: List[FieldError], field: str, value: Optional[str]) -> None:
    if value is None or not value.strip():
        errors.append(FieldError(field, "must not be blank"))


def _not_in_future(errors: List[FieldError], field: str, value: Optional[date]) -> None:
    if _require(errors, field, value) and value > date.today():
        errors.append(FieldError(field, "must not be in the future"))


def _amount(errors: List[FieldError], field: str, value: Optional[float]) -> None:
    if not _require(errors, field, value):
        return
    if not math.isfinite(value):
        errors.append(FieldError(field, "must be a finite number"))
    elif value < 0:
        errors.append(FieldError(field, "must not be negative"))


def validate_wishlist(wishlist: Wishlist) -> List[FieldError]:
    errors: List[FieldError] = []
    _not_in_future(errors, "creation_date", wishlist.creation_date)
    seen = []
    for comic in wishlist.items:
        if comic in seen:
            errors.append(FieldError("items", f"comic {comic.id} is listed more than once"))
        seen.append(comic)
    return errors


def validate_comic(comic: Comic) -> List[FieldError]:
    errors: List[FieldError] = []
    _require_text(errors, "title", comic.title)
    _require_text(errors, "author", comic.author)
    _require_text(errors, "publisher", comic.publisher)
    _not_in_future(errors, "publication_date", comic.publication_date)
    _require(errors, "category", comic.category)
    _require(errors, "available_for_auction", comic.available_for_auction)
    return errors


def validate_user(user: User) -> List[FieldError]:
    errors: List[FieldError] = []
    _require_text(errors, "first_name", user.first_name)
    _require_text(errors, "last_name", user.last_name)
    _require_text(errors, "password", user.password)
    _require_text(errors, "email", user.email)
    if user.email and "@" not in user.email:
        errors.append(FieldError("email", "must be a valid e-mail address"))
    _not_in_future(errors, "registration_date", user.registration_date)
    _require(errors, "role", user.role)
    if (
        user.subscription_start is not None
        and user.subscription_end is not None
        and user.subscription_end < user.subscription_start
    ):
        errors.append(FieldError("subscription_end", "must not be before subscription_start"))
    return errors


def validate_subscription(subscription: Subscription) -> List[FieldError]:
    errors: List[FieldError] = []
    _require(errors, "plan", subscription.plan)
    return errors


def validate_comic_copy(copy: ComicCopy) -> List[FieldError]:
    errors: List[FieldError] = []
    _require(errors, "condition", copy.condition)
    _amount(errors, "price", copy.price)
    _require(errors, "available", copy.available)
    _require(errors, "comic_id", copy.comic_id)
    return errors


def validate_auction(auction: Auction) -> List[FieldError]:
    errors: List[FieldError] = []
    has_start = _require(errors, "start_date", auction.start_date)
    has_end = _require(errors, "end_date", auction.end_date)
    if has_start and has_end and auction.end_date < auction.start_date:
        errors.append(FieldError("end_date", "must not be before start_date"))
    _amount(errors, "current_offer", auction.current_offer)
    _require(errors, "status", auction.status)
    _require(errors, "copy_id", auction.copy_id)
    return errors


def validate_order(order: Order) -> List[FieldError]:
    errors: List[FieldError] = []
    _amount(errors, "final_price", order.final_price)
    _not_in_future(errors, "order_date", order.order_date)
    _require(errors, "status", order.status)
    _require(errors, "user_id", order.user_id)
    return errors


def validate_order_detail(detail: OrderDetail) -> List[FieldError]:
    errors: List[FieldError] = []
    if _require(errors, "quantity", detail.quantity) and not 1 <= detail.quantity <= SQLITE_MAX_INTEGER:
        errors.append(FieldError("quantity", "must be a positive number"))
    _require(errors, "copy_id", detail.copy_id)
    _require(errors, "order_id", detail.order_id)
    return errors


def check_reference(
    errors: List[FieldError],
    repository: Repository,
    field: str,
    entity_id: Optional[int],
    label: str,
) -> None:
    """Record an error if ``entity_id`` is set but names no stored record."""
    if entity_id is not None and not repository.exists(entity_id):
        errors.append(FieldError(field, f"{label} {entity_id} does not exist"))


def ensure_valid(errors: List[FieldError]) -> None:
    """Raise ``InvalidRecordError`` if ``errors`` is not empty."""
    if errors:
        raise InvalidRecordError(errors)
