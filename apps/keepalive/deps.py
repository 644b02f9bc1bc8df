import logging
from typing import Optional

from apps.keepalive.config.keepalive_config import KeepAliveConfig, load_keepalive_config

logger = logging.getLogger(__name__)
_config: Optional[KeepAliveConfig] = None


def get_keepalive_config() -> KeepAliveConfig:
    global _config
    if _config is None:
        logger.info("Loading keep-alive config from environment")
        _config = load_keepalive_config()
    return _config
