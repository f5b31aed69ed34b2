"""Tests for the quality-control test log."""

from datetime import timedelta
from uuid import uuid4

import pytest

from food_quality_tracker.domain.notifications import (
    NotificationPriority,
    NotificationType,
)
from food_quality_tracker.domain.quality import QualityResult
from food_quality_tracker.services.notifications import NotificationService
from food_quality_tracker.services.quality import QualityTestService
from tests.conftest import NOW

USER = "firebase-uid-1"


def _record(  # type: ignore[no-untyped-def]
    service: QualityTestService, result: QualityResult, **overrides
):
    fields = {
        "product_name": "Pommes Golden",
        "test_type": "Pesticides",
        "result": result,
        "value": "0.15",
        "unit": "mg/kg",
        "standard": "< 0.1 mg/kg",
        "technician": "Dr. Benali",
    }
    fields.update(overrides)
    return service.record_test(USER, **fields)


def test_record_passing_test_without_notification(
    quality_test_service: QualityTestService,
    notification_service: NotificationService,
) -> None:
    test = _record(quality_test_service, QualityResult.PASS)

    assert test.id is not None
    assert test.date == NOW
    assert notification_service.list_notifications(USER) == []


def test_failed_test_raises_high_priority_alert(
    quality_test_service: QualityTestService,
    notification_service: NotificationService,
) -> None:
    product_id = uuid4()
    _record(quality_test_service, QualityResult.FAIL, product_id=product_id)

    [notification] = notification_service.list_notifications(USER)

    assert notification.type == NotificationType.QUALITY
    assert notification.title == "Test de qualité non conforme"
    assert notification.priority == NotificationPriority.HIGH
    assert notification.product_id == product_id
    assert "Pommes Golden" in notification.message


def test_warning_test_raises_medium_priority_alert(
    quality_test_service: QualityTestService,
    notification_service: NotificationService,
) -> None:
    _record(quality_test_service, QualityResult.WARNING)

    [notification] = notification_service.list_notifications(USER)

    assert notification.priority == NotificationPriority.MEDIUM


def test_list_tests_by_date_and_result(
    quality_test_service: QualityTestService,
) -> None:
    old = _record(
        quality_test_service, QualityResult.PASS, date=NOW - timedelta(days=2)
    )
    recent = _record(quality_test_service, QualityResult.FAIL)

    assert [test.id for test in quality_test_service.list_tests(USER)] == [
        recent.id,
        old.id,
    ]
    assert [
        test.id for test in quality_test_service.list_tests(USER, QualityResult.PASS)
    ] == [old.id]


def test_update_and_delete_test(quality_test_service: QualityTestService) -> None:
    test = _record(quality_test_service, QualityResult.WARNING)

    updated = quality_test_service.update_test(
        test.id, {"result": QualityResult.PASS, "notes": "Re-test OK"}
    )

    assert updated is not None
    assert updated.result == QualityResult.PASS
    assert updated.notes == "Re-test OK"
    assert quality_test_service.update_test(uuid4(), {"notes": "x"}) is None
    assert quality_test_service.delete_test(test.id) is True
    assert quality_test_service.delete_test(test.id) is False


def test_update_rejects_unknown_fields(
    quality_test_service: QualityTestService,
) -> None:
    test = _record(quality_test_service, QualityResult.PASS)

    with pytest.raises(ValueError):
        quality_test_service.update_test(test.id, {"user_id": "other"})
