"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  ``build_services``
runs once at process start; the result is passed down explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from sqlalchemy import Engine

from pos.application.pricing import PricingService
from pos.domain.service.discount_evaluator import DiscountEvaluator
from pos.infrastructure.config import Settings
from pos.infrastructure.logging_config import get_logger
from pos.infrastructure.persistence.db import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from pos.infrastructure.persistence.sqlalchemy_discount_repository import (
    SqlAlchemyDiscountRepository,
)
from pos.infrastructure.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from pos.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)


@dataclass
class Services:
    settings: Settings
    engine: Engine
    product_repo: SqlAlchemyProductRepository
    discount_repo: SqlAlchemyDiscountRepository
    order_repo: SqlAlchemyOrderRepository
    pricing_service: PricingService
    logger: structlog.stdlib.BoundLogger


def build_services(settings: Settings) -> Services:
    engine = create_db_engine(settings.database_url, echo=settings.sql_echo)
    init_db(engine)
    session_factory = create_session_factory(engine)

    product_repo = SqlAlchemyProductRepository(session_factory)
    discount_repo = SqlAlchemyDiscountRepository(session_factory)
    order_repo = SqlAlchemyOrderRepository(session_factory)

    logger = get_logger("pos")
    evaluator = DiscountEvaluator(discount_repo, logger=logger.bind(component="discounts"))
    pricing_service = PricingService(
        product_repo, evaluator, logger=logger.bind(component="pricing")
    )

    return Services(
        settings=settings,
        engine=engine,
        product_repo=product_repo,
        discount_repo=discount_repo,
        order_repo=order_repo,
        pricing_service=pricing_service,
        logger=logger,
    )
