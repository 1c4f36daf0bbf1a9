from .defaults import DEFAULTS
from .models import MultibaseConfig
from .settings import Settings, settings

__all__ = ["DEFAULTS", "MultibaseConfig", "Settings", "settings"]
