"""Initial data: the admin account and the sample portfolio of the public site"""

import logging

from studio_service.config.settings import Settings
from studio_service.infrastructure.store.provider import StudioStore
from studio_service.models.portfolio import PortfolioItemCreate, PortfolioType

logger = logging.getLogger(__name__)

SAMPLE_PORTFOLIO = [
    PortfolioItemCreate(
        type=PortfolioType.VIDEO,
        category="Весільний кліп",
        couple="Анна та Олексій",
        title="Романтична історія кохання",
        description="Емоційний кліп з найяскравішими моментами весільного дня",
        video_url="https://www.youtube.com/embed/dQw4w9WgXcQ",
        order_index=1,
    ),
    PortfolioItemCreate(
        type=PortfolioType.VIDEO,
        category="Весільний фільм",
        couple="Марія та Дмитро",
        title="Повна історія весільного дня",
        description="Детальний фільм з усіма важливими моментами церемонії та банкету",
        video_url="https://www.youtube.com/embed/dQw4w9WgXcQ",
        order_index=2,
    ),
    PortfolioItemCreate(
        type=PortfolioType.PHOTO,
        category="Весільна фотосесія",
        couple="Катерина та Ігор",
        title="Підготовка до свята",
        description="Фотозйомка ранкових зборів нареченої та підготовки нареченого",
        photos=[
            "https://images.unsplash.com/photo-1511285560929-80b456fea0bc?w=800&h=600&fit=crop",
            "https://images.unsplash.com/photo-1469371670807-013ccf25f16a?w=800&h=600&fit=crop",
            "https://images.unsplash.com/photo-1519741497674-611481863552?w=800&h=600&fit=crop",
        ],
        order_index=3,
    ),
]


async def seed_admin(store: StudioStore, settings: Settings) -> None:
    """Create the configured admin account unless it already exists"""
    if await store.get_admin_user(settings.admin_username) is not None:
        return
    await store.create_admin_user(
        username=settings.admin_username,
        email=settings.admin_email,
        password=settings.admin_password,
    )
    logger.info(f"Seeded admin account: {settings.admin_username}")


async def seed_sample_portfolio(store: StudioStore) -> None:
    """Add the sample items to an empty portfolio"""
    if await store.get_portfolio_items():
        return
    for item in SAMPLE_PORTFOLIO:
        await store.create_portfolio_item(item)
    logger.info(f"Seeded {len(SAMPLE_PORTFOLIO)} sample portfolio items")
