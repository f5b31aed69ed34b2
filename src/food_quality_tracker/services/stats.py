"""Statistics across a user's inventory and quality log."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from food_quality_tracker.domain.products import ProductStatus
from food_quality_tracker.domain.quality import QualityResult
from food_quality_tracker.domain.stats import UserStats
from food_quality_tracker.services.expiry import classify_status
from food_quality_tracker.services.inventory import ProductRepository
from food_quality_tracker.services.lookup import utc_now
from food_quality_tracker.services.notifications import NotificationRepository
from food_quality_tracker.services.quality import QualityTestRepository


@dataclass
class StatsService:
    """Service computing dashboard statistics."""

    product_repository: ProductRepository
    quality_test_repository: QualityTestRepository
    notification_repository: NotificationRepository
    clock: Callable[[], datetime] = utc_now

    def get_user_stats(self, user_id: str) -> UserStats:
        """Return product freshness counts and test compliance for a user."""
        products = self.product_repository.list_user_products(user_id)
        tests = self.quality_test_repository.list_user_tests(user_id)
        notifications = self.notification_repository.list_user_notifications(user_id)

        now = self.clock()
        statuses = [classify_status(product.expiry_date, now) for product in products]
        passed = sum(1 for test in tests if test.result == QualityResult.PASS)
        compliance = (passed / len(tests)) * 100 if tests else 0.0

        return UserStats(
            total_products=len(products),
            total_tests=len(tests),
            total_notifications=len(notifications),
            expired_products=statuses.count(ProductStatus.EXPIRED),
            warning_products=statuses.count(ProductStatus.WARNING),
            fresh_products=statuses.count(ProductStatus.FRESH),
            compliance=round(compliance, 1),
            passed_tests=passed,
            failed_tests=sum(1 for test in tests if test.result == QualityResult.FAIL),
            warning_tests=sum(
                1 for test in tests if test.result == QualityResult.WARNING
            ),
        )
