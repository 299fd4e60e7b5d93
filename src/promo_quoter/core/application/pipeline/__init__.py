from promo_quoter.core.application.pipeline.promotion_pipeline import (
    PipelineResult,
    PromotionPipeline,
)

__all__ = ["PipelineResult", "PromotionPipeline"]
