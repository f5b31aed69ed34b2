"""Tests for the statistics service."""

import asyncio
from datetime import timedelta

from food_quality_tracker.domain.quality import QualityResult
from food_quality_tracker.services.inventory import InventoryService
from food_quality_tracker.services.quality import QualityTestService
from food_quality_tracker.services.stats import StatsService
from tests.conftest import NOW, FakeClock

USER = "firebase-uid-1"


def _add_product(inventory_service: InventoryService, days: float) -> None:
    asyncio.run(
        inventory_service.add_from_barcode(
            USER, "3017620422003", expiry_date=NOW + timedelta(days=days)
        )
    )


def _record(service: QualityTestService, result: QualityResult) -> None:
    service.record_test(
        USER,
        product_name="Yaourt Nature Danone",
        test_type="pH",
        result=result,
        value="4.1",
        unit="pH",
        standard="3.8-4.6",
        technician="Dr. Amara",
    )


def test_user_stats(
    stats_service: StatsService,
    inventory_service: InventoryService,
    quality_test_service: QualityTestService,
) -> None:
    _add_product(inventory_service, -2)
    _add_product(inventory_service, 0)
    _add_product(inventory_service, 3)
    _add_product(inventory_service, 20)
    for result in (
        QualityResult.PASS,
        QualityResult.PASS,
        QualityResult.WARNING,
        QualityResult.FAIL,
        QualityResult.PASS,
        QualityResult.PASS,
    ):
        _record(quality_test_service, result)

    stats = stats_service.get_user_stats(USER)

    assert stats.total_products == 4
    assert stats.expired_products == 1
    assert stats.warning_products == 2
    assert stats.fresh_products == 1
    assert stats.total_tests == 6
    assert stats.passed_tests == 4
    assert stats.failed_tests == 1
    assert stats.warning_tests == 1
    assert stats.compliance == 66.7
    assert stats.total_notifications == 2


def test_stats_follow_the_clock(
    stats_service: StatsService,
    inventory_service: InventoryService,
    clock: FakeClock,
) -> None:
    _add_product(inventory_service, 10)

    assert stats_service.get_user_stats(USER).fresh_products == 1

    clock.advance(days=11)
    stats = stats_service.get_user_stats(USER)

    assert stats.fresh_products == 0
    assert stats.expired_products == 1


def test_empty_stats(stats_service: StatsService) -> None:
    stats = stats_service.get_user_stats(USER)

    assert stats.total_products == 0
    assert stats.compliance == 0.0
