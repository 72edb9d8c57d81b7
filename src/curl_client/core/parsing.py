"""
Разбор сырого результата передачи curl.

При HEADER=True curl пишет в буфер сначала все блоки заголовков (по
одному на каждый ответ в цепочке редиректов), затем тело. Длину блока
заголовков curl сообщает отдельно (HEADER_SIZE).
"""

import re
from typing import Dict, List, Mapping, Tuple, TypeVar

from ..message.messages import Message

M = TypeVar("M", bound=Message)

# Кодировка заголовков HTTP/1.x
HEADER_ENCODING = "iso-8859-1"

_STATUS_LINE = re.compile(r"HTTP/\d\.\d \d{3} \w+")
_HEADER_FIELD = re.compile(r"(\S+): (.*)")
_VALUE_SEPARATOR = re.compile(r"[,;]")

# Заголовки с датами: запятая внутри даты не разделяет значения
_DATE_HEADERS = re.compile(
    r"^(?:Date|Expires|Last-Modified|If-Modified-Since|If-Unmodified-Since|Retry-After)$", re.IGNORECASE
)

# "HTTP/x.y NNN " - reason phrase начинается сразу за этим префиксом
_REASON_OFFSET = 13


def decode_header_text(raw: bytes) -> str:
    return raw.decode(HEADER_ENCODING)


def get_reason_phrase(raw: str, status_code: int) -> str:
    """
    Reason phrase из status-line с нужным кодом.

    Из всех status-line (их несколько при редиректах) берётся первая,
    содержащая код. Если такой нет - пустая строка.

    Examples:
        >>> get_reason_phrase("HTTP/1.1 404 Not Found\\r\\n\\r\\n", 404)
        'Not Found'
        >>> get_reason_phrase("HTTP/1.1 404 Not Found\\r\\n\\r\\n", 500)
        ''
    """
    code = str(status_code)
    for line in raw.split("\r\n"):
        if _STATUS_LINE.search(line) and code in line:
            return line[_REASON_OFFSET:]
    return ""


def split_headers_and_body(raw: bytes, header_size: int) -> Tuple[str, bytes]:
    """
    Разделить результат передачи на блок заголовков и тело.

    Args:
        raw: Сырые байты из буфера curl
        header_size: Длина блока заголовков (HEADER_SIZE)

    Returns:
        (текст заголовков, байты тела)
    """
    return decode_header_text(raw[:header_size]), raw[header_size:]


def parse_header_block(text: str) -> Dict[str, List[str]]:
    """
    Разобрать блок заголовков в {имя: [значения]}.

    Значение со ',' или ';' разбивается на список, кроме заголовков с
    датами. Строки без "имя: значение" (status-line, пустые) пропускаются;
    повторный заголовок перезаписывает предыдущий.

    Example:
        >>> parse_header_block("X-Foo: a,b\\r\\nDate: Mon, 01 Jan 2024 00:00:00 GMT\\r\\n")
        {'X-Foo': ['a', 'b'], 'Date': ['Mon, 01 Jan 2024 00:00:00 GMT']}
    """
    headers: Dict[str, List[str]] = {}
    for line in text.split("\r\n"):
        line = line.rstrip()
        match = _HEADER_FIELD.match(line)
        if not match:
            continue
        name, value = match.group(1), match.group(2)
        if _VALUE_SEPARATOR.search(value) and not _DATE_HEADERS.search(name):
            values = [item.strip() for item in _VALUE_SEPARATOR.split(value)]
        else:
            values = value.split("\n")
        headers[name] = values
    return headers


def apply_headers(message: M, headers: Mapping[str, List[str]]) -> M:
    """Установить заголовки сообщению (with_header - значения заменяются)."""
    for name, values in headers.items():
        message = message.with_header(name, values)
    return message


def to_header_field_list(headers: Mapping[str, List[str]]) -> List[str]:
    """
    {имя: [значения]} -> ["Имя: v1,v2", ...] для pycurl.HTTPHEADER.

    Example:
        >>> to_header_field_list({"Accept": ["text/html", "application/json"]})
        ['Accept: text/html,application/json']
    """
    return [f"{name}: {','.join(values)}" for name, values in headers.items()]
