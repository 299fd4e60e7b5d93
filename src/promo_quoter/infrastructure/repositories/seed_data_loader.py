"""Loads catalog products and promotions from a YAML seed file.

Expected layout::

    products:
      - {id: 1, name: Laptop, category: ELECTRONICS, price: "1000.00", stock: 10}
    promotions:
      - {id: 1, type: PERCENT_OFF_CATEGORY, name: Tech10, priority: 1,
         enabled: true, category: ELECTRONICS, percent: "10"}
"""

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from promo_quoter.core.domain.catalog import Product
from promo_quoter.core.domain.promotion import PromotionRecord, PromotionType
from promo_quoter.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("seed_data_loader")


class ProductSeedModel(BaseModel):
    id: int
    name: str
    category: str
    price: Decimal = Field(..., ge=0)
    stock: int = Field(..., ge=0)


class PromotionSeedModel(BaseModel):
    id: int | None = None
    type: PromotionType
    name: str
    priority: int | None = None
    enabled: bool = True
    category: str | None = None
    percent: Decimal | None = None
    product_id: int | None = None
    buy_qty: int | None = Field(default=None, ge=0)
    free_qty: int | None = Field(default=None, ge=0)


class SeedDataModel(BaseModel):
    products: list[ProductSeedModel] = Field(default_factory=list)
    promotions: list[PromotionSeedModel] = Field(default_factory=list)


@dataclass(frozen=True)
class SeedData:
    products: list[Product]
    promotions: list[PromotionRecord]


class SeedDataLoader:

    @staticmethod
    def load(path: Path) -> SeedData:
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            model = SeedDataModel.model_validate(raw)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.error("Failed to load seed data", path=str(path), error_type=type(e).__name__, error_details=str(e))
            raise

        data = SeedData(
            products=[
                Product(id=p.id, name=p.name, category=p.category, price=p.price, stock=p.stock)
                for p in model.products
            ],
            promotions=[PromotionRecord(**p.model_dump()) for p in model.promotions],
        )
        logger.info("Seed data loaded", path=str(path), products=len(data.products), promotions=len(data.promotions))
        return data
