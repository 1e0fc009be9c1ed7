# utils package
from .constants import (
    APP_VERSION, APP_TITLE, ERAS, NETWORKS, PROTOCOL_PARAM_NAMES, RATIO_PARAMS, TAB_ICONS
)
from .helpers import (
    normalize_text, parse_decimal, parse_int, parse_bool, format_param_label
)
from .config import get_setting, get_blockfrost_project_id
from .logger import get_logger

__all__ = [
    'APP_VERSION', 'APP_TITLE', 'ERAS', 'NETWORKS', 'PROTOCOL_PARAM_NAMES', 'RATIO_PARAMS', 'TAB_ICONS',
    'normalize_text', 'parse_decimal', 'parse_int', 'parse_bool', 'format_param_label',
    'get_setting', 'get_blockfrost_project_id', 'get_logger'
]
