from .experiment import (
    PURCHASE_INTENT,
    PurchaseIntentExperiment,
    PurchaseIntentSettings,
)

__all__ = [
    "PURCHASE_INTENT",
    "PurchaseIntentExperiment",
    "PurchaseIntentSettings",
]
