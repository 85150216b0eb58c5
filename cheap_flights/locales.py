"""Built-in locale bundles.

Bundles are plain read-only values handed to the services; nothing in
request handling mutates them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .domain.errors import ConfigurationError
from .domain.models import LocaleBundle

EN = LocaleBundle(
    language="en",
    help=(
        "Hi! I am an elderly bot that looks for cheap tickets. "
        'To start a search send a message like "Kiev Tallinn" '
        'or "From Kiev to Tallinn"'
    ),
    help_instructions='Send two cities, for example "Kiev Tallinn"',
    parse_error="🔴 could not understand the airport data",
    airport_data_error="🔴 could not retrieve source and destination points",
    request_error="🔴 an error occurred while sending the request",
    nothing_found="Nothing found",
    results="Total results: {total}, showing up to {shown} best:",
)

RU = LocaleBundle(
    language="ru",
    help=(
        "Вас приветствует пожилой бот для поиска дешевых билетов. "
        'Чтобы начать поиск отправьте пожилое сообщение в виде "Киев Таллин" '
        'или "Из Киева в Таллин"'
    ),
    help_instructions='Отправьте два города, например "Киев Таллин"',
    parse_error="🔴 не смог разобрать данные об аэропортах",
    airport_data_error="🔴 не смог получить данные об аэропортах",
    request_error="🔴 произошла ошибка при отправке запроса",
    nothing_found="Ничего не нашел",
    results="Всего результатов: {total}, покажу до {shown} лучших:",
    weekdays=(
        "понедельник",
        "вторник",
        "среда",
        "четверг",
        "пятница",
        "суббота",
        "воскресенье",
    ),
)

DEFAULT_BUNDLES: Mapping[str, LocaleBundle] = MappingProxyType(
    {
        EN.language: EN,
        RU.language: RU,
    }
)


def select_bundle(
    bundles: Mapping[str, LocaleBundle],
    language: str,
    default: str = "en",
) -> LocaleBundle:
    """Pick the bundle for a language, falling back to the default one.

    Raises:
        ConfigurationError: If neither the language nor the default is available.
    """
    bundle = bundles.get(language) or bundles.get(default)
    if bundle is None:
        raise ConfigurationError(
            f"No locale bundle for {language!r} or {default!r}",
            setting_name="default_language",
        )
    return bundle
