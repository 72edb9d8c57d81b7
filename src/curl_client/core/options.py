"""
Преобразование конфигурации клиента в опции curl.

Чистые функции без I/O: на вход - снимок ClientConfiguration и данные
запроса, на выход - словарь {pycurl option: value}.
"""

import re
from types import MappingProxyType
from typing import Any, Dict, Mapping

import pycurl

from . import config as cfg

# Опции, которые добавляются к каждой передаче, если ключ ещё не занят
DEFAULT_CURL_OPTIONS: Mapping[int, Any] = MappingProxyType({
    pycurl.HEADER: True,
    pycurl.AUTOREFERER: True,
    pycurl.FOLLOWLOCATION: True,
    pycurl.PROTOCOLS: pycurl.PROTO_HTTP | pycurl.PROTO_HTTPS,
})

HTTP_AUTH_FLAGS: Mapping[str, int] = MappingProxyType({
    "basic": pycurl.HTTPAUTH_BASIC,
    "digest": pycurl.HTTPAUTH_DIGEST,
    "ntlm": pycurl.HTTPAUTH_NTLM,
    "gssnegotiate": pycurl.HTTPAUTH_GSSNEGOTIATE,
    "any": pycurl.HTTPAUTH_ANY,
})

# Опции конфигурации, которые переходят в curl один к одному
_DIRECT_OPTIONS: Mapping[str, int] = MappingProxyType({
    cfg.TIMEOUT: pycurl.TIMEOUT,
    cfg.CONNECT_TIMEOUT: pycurl.CONNECTTIMEOUT,
    cfg.MAX_REDIRECTS: pycurl.MAXREDIRS,
    cfg.DEFAULT_PROTOCOL: pycurl.DEFAULT_PROTOCOL,
})

_HTTP_1_0 = re.compile(r"^1(\.0)?$")
_HTTP_1_1 = re.compile(r"^1(\.1)?$")
_HTTP_2 = re.compile(r"^2(\.0)?$")


def translate_configuration(settings: Mapping[str, Any]) -> Dict[int, Any]:
    """
    Перевести опции клиента в опции curl.

    enable_compression / enable_decompression в curl не передаются -
    их читают формирование запроса и разбор ответа.

    Args:
        settings: Снимок конфигурации (ClientConfiguration.snapshot())

    Returns:
        Словарь {pycurl option: value}

    Example:
        >>> translate_configuration({"timeout": 10, "http_auth": "ntlm"})
        {pycurl.TIMEOUT: 10, pycurl.HTTPAUTH: pycurl.HTTPAUTH_NTLM}
    """
    options: Dict[int, Any] = {}
    for name, value in settings.items():
        if name in _DIRECT_OPTIONS:
            options[_DIRECT_OPTIONS[name]] = value
        elif name == cfg.HTTP_AUTH:
            options[pycurl.HTTPAUTH] = HTTP_AUTH_FLAGS[value.lower()]
    return options


def resolve_http_version(protocol_version: str, scheme: str = "") -> int:
    """
    Версия протокола запроса -> CURL_HTTP_VERSION_*.

    "1" совпадает и с 1.0, и с 1.1; побеждает первое совпадение (1.0).
    HTTP/2 поверх https - CURL_HTTP_VERSION_2TLS, иначе CURL_HTTP_VERSION_2_0.
    Всё остальное - CURL_HTTP_VERSION_NONE (curl выбирает сам).

    Examples:
        >>> resolve_http_version("1.1") == pycurl.CURL_HTTP_VERSION_1_1
        True
        >>> resolve_http_version("2", "https") == pycurl.CURL_HTTP_VERSION_2TLS
        True
    """
    version = (protocol_version or "").strip()
    if _HTTP_1_0.match(version):
        return pycurl.CURL_HTTP_VERSION_1_0
    if _HTTP_1_1.match(version):
        return pycurl.CURL_HTTP_VERSION_1_1
    if _HTTP_2.match(version):
        if (scheme or "").lower() == "https":
            return pycurl.CURL_HTTP_VERSION_2TLS
        return pycurl.CURL_HTTP_VERSION_2_0
    return pycurl.CURL_HTTP_VERSION_NONE


def apply_defaults(options: Dict[int, Any]) -> Dict[int, Any]:
    """Дополнить опции значениями DEFAULT_CURL_OPTIONS (занятые ключи не трогаются)."""
    for key, value in DEFAULT_CURL_OPTIONS.items():
        options.setdefault(key, value)
    return options
