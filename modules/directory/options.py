"""Fixed choice lists offered to clients building a filter."""

from __future__ import annotations

DISTRICTS = {
    "Ленинский": "Ленинский",
    "Октябрьский": "Октябрьский",
    "Центр": "Центр города",
    "Северный": "Северный микрорайон",
    "Южный": "Южный микрорайон",
    "Девятовка": "Девятовка",
    "Грандичи": "Грандичи",
    "Вишневец": "Вишневец",
}

SPECIALIZATIONS = (
    "Терапия",
    "Кардиология",
    "Хирургия",
    "Педиатрия",
    "Стоматология",
    "Неврология",
    "Офтальмология",
    "Гинекология",
    "Дерматология",
    "Эндокринология",
    "Урология",
    "Онкология",
    "Психиатрия",
    "Ортопедия",
    "Травматология",
    "Ревматология",
    "Инфекционные заболевания",
    "Лабораторная диагностика",
    "Скорая помощь",
)

QUICK_SEARCHES = (
    "скорая помощь",
    "стоматология",
    "кардиология",
    "педиатрия",
    "анализы",
)

SORT_LABELS = {
    "alphabetical": "По алфавиту",
    "price": "По стоимости",
    "rating": "По рейтингу",
}

PRICE_LABELS = {
    "all": "Все учреждения",
    "free": "Бесплатные",
    "paid": "Платные",
}


__all__ = ["DISTRICTS", "SPECIALIZATIONS", "QUICK_SEARCHES", "SORT_LABELS", "PRICE_LABELS"]
