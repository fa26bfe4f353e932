from .loader import ConfigError, load_yaml_conf
from .models import LogSettings, RelayOptions

__all__ = ["ConfigError", "load_yaml_conf", "LogSettings", "RelayOptions"]
