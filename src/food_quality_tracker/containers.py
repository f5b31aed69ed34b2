"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_quality_tracker.adapters.openfoodfacts_client import (
    CatalogClient,
    HttpxOpenFoodFactsClient,
)
from food_quality_tracker.adapters.supabase_notification_repository import (
    SupabaseNotificationRepository,
)
from food_quality_tracker.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from food_quality_tracker.adapters.supabase_quality_test_repository import (
    SupabaseQualityTestRepository,
)
from food_quality_tracker.config import Settings
from food_quality_tracker.services.inventory import InventoryService
from food_quality_tracker.services.lookup import BarcodeResolver, ProductLookupService
from food_quality_tracker.services.notifications import NotificationService
from food_quality_tracker.services.quality import QualityTestService
from food_quality_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_client: CatalogClient
    lookup_service: ProductLookupService
    inventory_service: InventoryService
    notification_service: NotificationService
    quality_test_service: QualityTestService
    stats_service: StatsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    product_repository = SupabaseProductRepository(supabase_client)
    quality_test_repository = SupabaseQualityTestRepository(supabase_client)
    notification_repository = SupabaseNotificationRepository(supabase_client)
    catalog_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.catalog_base_url,
        timeout_seconds=resolved_settings.catalog_timeout_seconds,
        user_agent=resolved_settings.catalog_user_agent,
    )
    lookup_service = ProductLookupService(
        resolver=BarcodeResolver(catalog_client),
        search_page_size=resolved_settings.search_page_size,
    )
    inventory_service = InventoryService(
        repository=product_repository,
        lookup_service=lookup_service,
    )
    notification_service = NotificationService(
        repository=notification_repository,
        inventory_service=inventory_service,
    )
    quality_test_service = QualityTestService(
        repository=quality_test_repository,
        notification_service=notification_service,
    )
    stats_service = StatsService(
        product_repository=product_repository,
        quality_test_repository=quality_test_repository,
        notification_repository=notification_repository,
    )

    async def close_resources() -> None:
        await catalog_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_client=catalog_client,
        lookup_service=lookup_service,
        inventory_service=inventory_service,
        notification_service=notification_service,
        quality_test_service=quality_test_service,
        stats_service=stats_service,
        close_resources=close_resources,
    )
