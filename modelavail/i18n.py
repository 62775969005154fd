"""
User-facing strings for the availability console.
"""

from typing import Dict, Optional

from .config import DEFAULT_LOCALE

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "Model Availability",
        "unavailable_count": "{count} unavailable",
        "loading": "Loading...",
        "refresh": "Refresh",
        "no_unavailable": "All models are available",
        "no_unavailable_desc": "No model is currently restricted for any client.",
        "fetch_failed": "Could not load unavailable models",
        "stale_data": "Showing last known data; the latest refresh failed.",
        "model_name": "Model",
        "provider": "Provider",
        "client": "Client",
        "reason": "Reason",
        "since": "Since",
        "actions": "Actions",
        "reset": "Reset",
        "resetting": "Resetting...",
        "reason_quota_exceeded": "Quota exceeded",
        "reason_cooldown": "Cooling down",
        "reason_suspended": "Suspended",
        "fetch_error": "Failed to load unavailable models",
        "reset_success": "{model} has been reset to available",
        "reset_error": "Failed to reset model availability",
        "menu_refresh": "R. Refresh",
        "menu_reset": "1-{count}. Reset a model",
        "menu_reset_all": "A. Reset all",
        "menu_quit": "Q. Quit",
        "select_option": "Select option",
    },
    "zh": {
        "title": "模型可用性",
        "unavailable_count": "{count} 个不可用",
        "loading": "加载中...",
        "refresh": "刷新",
        "no_unavailable": "所有模型均可用",
        "no_unavailable_desc": "当前没有任何客户端受限的模型。",
        "fetch_failed": "无法加载不可用模型",
        "stale_data": "显示的是上次获取的数据，最近一次刷新失败。",
        "model_name": "模型",
        "provider": "提供商",
        "client": "客户端",
        "reason": "原因",
        "since": "开始时间",
        "actions": "操作",
        "reset": "重置",
        "resetting": "重置中...",
        "reason_quota_exceeded": "配额已用尽",
        "reason_cooldown": "冷却中",
        "reason_suspended": "已暂停",
        "fetch_error": "获取不可用模型失败",
        "reset_success": "{model} 已重置为可用",
        "reset_error": "重置模型可用性失败",
        "menu_refresh": "R. 刷新",
        "menu_reset": "1-{count}. 重置模型",
        "menu_reset_all": "A. 全部重置",
        "menu_quit": "Q. 退出",
        "select_option": "请选择",
    },
}


def translate(key: str, locale: Optional[str] = None, **params) -> str:
    """
    Look up a message, falling back to English and then to the key itself.

    Args:
        key: Message key
        locale: Locale code; defaults to MODELAVAIL_LOCALE
        **params: Values substituted into the message

    Returns:
        The formatted message
    """
    catalog = MESSAGES.get(locale or DEFAULT_LOCALE, MESSAGES["en"])
    template = catalog.get(key) or MESSAGES["en"].get(key, key)
    if not params:
        return template
    try:
        return template.format(**params)
    except (KeyError, IndexError, ValueError):
        return template
