"""Tests for co-purchase recommendations."""

from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import pytest

from grocery_api.exceptions import ValidationError
from grocery_api.models.purchase import PurchaseHistory
from grocery_api.services.recommendations import RecommendationService

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=UTC)


def days_ago(days: int, hour: int = 12) -> datetime:
    return (NOW - timedelta(days=days)).replace(hour=hour)


@pytest.fixture
def buy(db):
    """Record purchases for a user on a given day."""

    def _buy(user, when: datetime, *item_names: str) -> None:
        db.add_all(
            PurchaseHistory(user_id=user.id, item_name=name, purchased_on=when)
            for name in item_names
        )
        db.commit()

    return _buy


@pytest.fixture
def service(db):
    return RecommendationService(db)


@pytest.fixture
def shoppers(make_user, buy):
    """Target user 1 bought Milk yesterday; users 2 and 3 have older trips."""
    target, neighbour, regular = make_user("Target"), make_user("Neighbour"), make_user("Regular")

    buy(target, days_ago(1), "Milk")

    buy(regular, days_ago(2), "Milk", "Bread", "Eggs")
    buy(regular, days_ago(5), "Butter", "Cheese", "Milk")
    buy(regular, days_ago(9), "Apples", "Bananas", "Bread")
    buy(regular, days_ago(14), "Milk", "Eggs", "Yogurt", "Cereal")
    buy(regular, days_ago(20), "Chicken", "Rice", "Juice")

    buy(neighbour, days_ago(7), "Milk", "Bread")

    return target, neighbour, regular


def test_recommends_same_day_co_purchases(service, shoppers):
    """Test that items bought on the same day as Milk by other users are ranked by count."""
    target, _, _ = shoppers

    results = service.recommend(target.id, now=NOW)

    assert len(results) == 5
    # Bread: regular day 2, neighbour day 7. Eggs: regular days 2 and 14.
    top_two = {r["item_name"]: r["freq"] for r in results[:2]}
    assert top_two == {"Bread": 2, "Eggs": 2}
    # Remaining slots come from Butter, Cheese, Yogurt, Cereal (order among ties unspecified)
    assert all(r["freq"] == 1 for r in results[2:])
    assert {r["item_name"] for r in results[2:]} < {"Butter", "Cheese", "Yogurt", "Cereal"}


def test_results_sorted_by_frequency(service, shoppers):
    target, _, _ = shoppers

    freqs = [r["freq"] for r in service.recommend(target.id, now=NOW)]

    assert freqs == sorted(freqs, reverse=True)


def test_excludes_recent_items_and_other_days(service, shoppers):
    """Test that the user's recent items and items from other days are never recommended."""
    target, _, _ = shoppers

    names = {r["item_name"] for r in service.recommend(target.id, now=NOW)}

    assert "Milk" not in names
    # Bought by the regular shopper, but never on a day with Milk
    assert names.isdisjoint({"Apples", "Bananas", "Chicken", "Rice", "Juice"})


def test_counts_every_pairing(make_user, buy, service):
    """Test that each recent-item purchase on a day pairs with every other purchase that day."""
    target, other = make_user(), make_user()
    buy(target, days_ago(1), "Milk", "Coffee")
    buy(other, days_ago(3), "Milk", "Coffee", "Bread")
    buy(other, days_ago(3, hour=18), "Bread")

    results = service.recommend(target.id, now=NOW)

    # Two recent items x two Bread purchases on the same calendar day
    assert results == [{"item_name": "Bread", "freq": 4}]


def test_window_is_seven_days_inclusive(make_user, buy, service):
    target, other = make_user(), make_user()
    buy(target, NOW - timedelta(days=7), "Milk")
    buy(target, NOW - timedelta(days=8), "Coffee")
    buy(other, days_ago(30), "Milk", "Bread")
    buy(other, days_ago(31), "Coffee", "Sugar")

    results = service.recommend(target.id, now=NOW)

    assert results == [{"item_name": "Bread", "freq": 1}]


def test_related_users_have_no_recency_bound(make_user, buy, service):
    target, other = make_user(), make_user()
    buy(target, days_ago(0), "Milk")
    buy(other, days_ago(400), "Milk", "Flour")

    assert service.recommend(target.id, now=NOW) == [{"item_name": "Flour", "freq": 1}]


def test_ignores_own_history(make_user, buy, service):
    """Test that the target's own same-day purchases do not produce recommendations."""
    target = make_user()
    buy(target, days_ago(1), "Milk")
    buy(target, days_ago(10), "Milk", "Bread")

    assert service.recommend(target.id, now=NOW) == []


def test_no_recent_purchases(make_user, buy, service):
    target, other = make_user(), make_user()
    buy(target, days_ago(30), "Milk")
    buy(other, days_ago(2), "Milk", "Bread")

    assert service.recommend(target.id, now=NOW) == []


def test_unknown_user(service):
    assert service.recommend(424242, now=NOW) == []


def test_limit_is_configurable(db, make_user, buy):
    target, other = make_user(), make_user()
    buy(target, days_ago(1), "Milk")
    buy(other, days_ago(2), "Milk", "A", "B", "C")

    results = RecommendationService(db, limit=2).recommend(target.id, now=NOW)

    assert len(results) == 2


@pytest.mark.parametrize("user_id", ["abc", "0", "-1", 0, None, "1.5"])
def test_invalid_user_id_rejected_before_query(user_id):
    """Test that invalid ids fail validation without touching the database."""
    db = MagicMock()

    with pytest.raises(ValidationError):
        RecommendationService(db).recommend(user_id)

    db.execute.assert_not_called()
