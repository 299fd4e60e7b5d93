"""Cart pricing, promotion rules and idempotent order confirmation."""

__version__ = "0.1.0"
