# src/curl_client/utils/sanitizer.py
"""
Маскирование чувствительных данных в логах.

Клиент логирует URL, заголовки запроса и текст ошибок curl; всё это
проходит через mask_sensitive_data перед записью.
"""

import re
from typing import Any, Dict, Iterable

REDACTED = "***REDACTED***"

# Чувствительные ключи (case-insensitive): имена заголовков и параметров
SENSITIVE_KEYS = {
    'authorization', 'proxy-authorization', 'cookie', 'set-cookie',
    'x-api-key', 'api_key', 'apikey', 'x-auth-token', 'auth_token',
    'access_token', 'refresh_token', 'token', 'password', 'passwd', 'secret',
    'client_secret',
}

# Паттерны для строк: группа 2 - маскируемое значение
SENSITIVE_PATTERNS = [
    re.compile(r'(Bearer\s+)([A-Za-z0-9\-._~+/]+=*)()', re.IGNORECASE),
    re.compile(r'(Basic\s+)([A-Za-z0-9+/]+=*)()', re.IGNORECASE),
    re.compile(r'((?:api[_-]?key|token|password|secret)=)([^\s&,;]+)()', re.IGNORECASE),
    # user:password@host в URL
    re.compile(r'(://[^:/@\s]+:)([^@/\s]+)(@)'),
]


def is_sensitive_key(key: str) -> bool:
    return key.lower() in SENSITIVE_KEYS


def mask_sensitive_data(data: Any, mask: str = REDACTED) -> Any:
    """
    Рекурсивно маскирует чувствительные данные в словарях, списках, строках.

    Args:
        data: dict, list/tuple, str или любое другое значение
        mask: Строка-заменитель

    Returns:
        Копия данных с замаскированными значениями

    Examples:
        >>> mask_sensitive_data({"Authorization": ["Bearer abc"], "Accept": ["*/*"]})
        {'Authorization': '***REDACTED***', 'Accept': ['*/*']}
        >>> mask_sensitive_data("https://api.example.com/?api_key=123&page=1")
        'https://api.example.com/?api_key=***REDACTED***&page=1'
    """
    if data is None or isinstance(data, (bool, int, float)):
        return data
    if isinstance(data, str):
        return _mask_string(data, mask)
    if isinstance(data, dict):
        return _mask_dict(data, mask)
    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item, mask) for item in data)
    return data


def _mask_dict(data: Dict[Any, Any], mask: str) -> Dict[Any, Any]:
    return {
        key: mask if isinstance(key, str) and is_sensitive_key(key) else mask_sensitive_data(value, mask)
        for key, value in data.items()
    }


def _mask_string(text: str, mask: str) -> str:
    for pattern in SENSITIVE_PATTERNS:
        text = pattern.sub(lambda m: m.group(1) + mask + m.group(3), text)
    return text


def add_sensitive_keys(keys: Iterable[str]) -> None:
    """Расширить набор чувствительных ключей (например, свои заголовки)."""
    SENSITIVE_KEYS.update(key.lower() for key in keys)
