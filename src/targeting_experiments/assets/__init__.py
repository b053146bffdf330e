from .experiments import purchase_intent_settings

__all__ = ["purchase_intent_settings"]
