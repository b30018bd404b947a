"""Seed fixtures for the directory: a handful of Grodno institutions."""

from __future__ import annotations

from copy import deepcopy

from .models import (
    DaySchedule,
    Doctor,
    Institution,
    InstitutionType,
    NewsCategory,
    NewsItem,
    Review,
    WEEKDAYS,
    default_schedule,
)
from .repository import EntityStore


def _round_the_clock():
    return {day: DaySchedule("00:00", "23:59", True) for day in WEEKDAYS}


def _weekdays(open_: str, close: str):
    schedule = {day: DaySchedule(open_, close, True) for day in WEEKDAYS[:5]}
    schedule["saturday"] = DaySchedule("", "", False)
    schedule["sunday"] = DaySchedule("", "", False)
    return schedule


INSTITUTIONS = [
    Institution(
        id="1",
        name="Гродненская университетская клиника",
        address="ул. Горького, 77",
        phone="+375 152 43-51-00",
        email="info@gocb.by",
        website="https://gocb.by",
        type=InstitutionType.hospital,
        paid=False,
        working_hours=_round_the_clock(),
        services=["Хирургия", "Кардиология", "Неврология", "Скорая помощь"],
        doctors=[
            Doctor("d1", "Иванов Сергей Петрович", "Кардиология", 18, "Высшая"),
            Doctor("d2", "Ковальчук Анна Игоревна", "Неврология", 11, "Первая"),
        ],
        description="Многопрофильная больница с круглосуточным приёмным отделением.",
        rating=4.6,
        review_count=2,
        district="Ленинский",
        lat=53.6884,
        lng=23.8258,
        achievements=["Центр кардиохирургии региона"],
        years_of_work=65,
    ),
    Institution(
        id="2",
        name="Городская поликлиника №1",
        address="ул. Советская, 12",
        phone="+375 152 72-10-10",
        email="gp1@grodno.by",
        type=InstitutionType.polyclinic,
        paid=False,
        working_hours=default_schedule(),
        services=["Терапия", "Педиатрия", "Офтальмология", "Лабораторная диагностика"],
        doctors=[Doctor("d3", "Мельник Ольга Васильевна", "Терапия", 9, "Первая")],
        description="Поликлиника для взрослого и детского населения центра города.",
        rating=4.1,
        review_count=1,
        district="Центр",
        lat=53.6779,
        lng=23.8296,
        years_of_work=40,
    ),
    Institution(
        id="3",
        name="Медицинский центр «Лода»",
        address="пр. Клецкова, 25",
        phone="+375 29 600-00-00",
        email="lode@lode.by",
        website="https://lode.by",
        type=InstitutionType.center,
        paid=True,
        working_hours=default_schedule(),
        services=["Эндокринология", "Гинекология", "УЗИ", "Анализы"],
        doctors=[Doctor("d4", "Савич Ирина Андреевна", "Эндокринология", 14, "Высшая")],
        description="Платный медицинский центр с собственной лабораторией.",
        rating=4.8,
        district="Октябрьский",
        lat=53.6642,
        lng=23.8051,
        years_of_work=12,
    ),
    Institution(
        id="4",
        name="Стоматологическая клиника «Дентал Арт»",
        address="ул. Дзержинского, 94",
        phone="+375 33 311-22-33",
        email="hello@dentalart.by",
        type=InstitutionType.clinic,
        paid=True,
        working_hours=_weekdays("09:00", "20:00"),
        services=["Стоматология", "Ортодонтия", "Имплантация"],
        doctors=[Doctor("d5", "Жук Дмитрий Олегович", "Стоматология", 7, "Вторая")],
        description="Лечение и протезирование зубов, детская стоматология.",
        rating=4.4,
        district="Девятовка",
        lat=53.6690,
        lng=23.7802,
        years_of_work=8,
    ),
    Institution(
        id="5",
        name="Аптека «Белфармация» №14",
        address="ул. Ожешко, 3",
        phone="+375 152 74-44-14",
        email="apteka14@pharma.by",
        type=InstitutionType.pharmacy,
        paid=True,
        working_hours=_round_the_clock(),
        services=["Рецептурный отдел", "Изготовление лекарств"],
        description="Круглосуточная государственная аптека.",
        rating=3.9,
        district="Центр",
        lat=53.6785,
        lng=23.8312,
        years_of_work=30,
    ),
    Institution(
        id="6",
        name="Детская областная клиническая больница",
        address="бул. Ленинского Комсомола, 57",
        phone="+375 152 75-70-50",
        email="dokb@grodno.by",
        type=InstitutionType.hospital,
        paid=False,
        working_hours=_round_the_clock(),
        services=["Педиатрия", "Травматология", "Хирургия"],
        doctors=[Doctor("d6", "Лис Наталья Михайловна", "Педиатрия", 21, "Высшая")],
        description="Стационар для детей со всей области.",
        rating=4.5,
        district="Вишневец",
        lat=53.6951,
        lng=23.8505,
        years_of_work=50,
    ),
]

REVIEWS = [
    Review("r1", "1", "Алексей", 5, "Быстро приняли в приёмном покое, спасибо врачам.", "2024-03-05", True),
    Review("r2", "1", "Марина", 4, "Хорошие специалисты, но долгое ожидание.", "2024-04-18", True),
    Review("r3", "2", "Виктор", 4, "Терапевт внимательный, запись через сайт удобная.", "2024-05-02", True),
    Review("r4", "3", "Ольга", 5, "Анализы готовы на следующий день.", "2024-06-11", False),
]

NEWS = [
    NewsItem(
        "n1",
        "Сезон вакцинации против гриппа",
        "В поликлиниках города стартовала вакцинация.",
        "Прививку можно сделать бесплатно в поликлинике по месту жительства.",
        NewsCategory.prevention,
        "2024-09-15",
        source="Управление здравоохранения",
    ),
    NewsItem(
        "n2",
        "Новый кардиологический корпус",
        "Университетская клиника открыла новый корпус.",
        "В корпусе размещены отделения кардиохирургии и реабилитации.",
        NewsCategory.announcement,
        "2024-08-01",
    ),
    NewsItem(
        "n3",
        "День здоровья в парке Жилибера",
        "Бесплатные консультации и измерение давления.",
        "Врачи городских поликлиник проведут консультации для всех желающих.",
        NewsCategory.events,
        "2024-07-20",
    ),
]


def seed(store: EntityStore) -> None:
    """Replace the store contents with the bundled fixtures."""

    store.load(deepcopy(INSTITUTIONS), deepcopy(REVIEWS), deepcopy(NEWS))


__all__ = ["INSTITUTIONS", "REVIEWS", "NEWS", "seed"]
