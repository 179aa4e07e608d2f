"""
Week Numbering — Нумерация недель по явной политике

Чистые функции без состояния. Instant — целое число миллисекунд Unix epoch (UTC).
Календарная дата instant определяется в часовом поясе политики.

ПРАВИЛА НУМЕРАЦИИ:
    week_start(d) = d - ((isoweekday(d) - first_day_of_week) mod 7)
    Неделя 1 года Y начинается с week_start(01.01.Y), если в этой неделе
    не меньше minimal_days_in_first_week дней года Y, иначе неделей позже.
    Дни до недели 1 года Y → последняя неделя года Y-1.
    Дни начиная с недели 1 года Y+1 → неделя 1 года Y+1.

РАЗНИЦА В НЕДЕЛЯХ:
    weeks_between(a, b) = (week_start(date(b)) - week_start(date(a))) / 7
    Вычитание номеров недель не используется: на границе года оно даёт
    52 вместо 1 (см. src.diagnostics.calendar_report).

ИНВАРИАНТЫ:
1. week_identity_of — чистая функция instant и политики
2. offset_weeks(offset_weeks(t, n), -n) == t точно
3. Некорректные даты (день 32, месяц 13) → InvalidCalendarDate, без clamp
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Final

from src.core.domain.week_identity import WeekIdentity
from src.core.domain.week_policy import Weekday, WeekPolicy


# =============================================================================
# CONSTANTS
# =============================================================================

DAYS_PER_WEEK: Final[int] = 7

MILLIS_PER_DAY: Final[int] = 24 * 60 * 60 * 1000

MILLIS_PER_WEEK: Final[int] = DAYS_PER_WEEK * MILLIS_PER_DAY

# Последний год нумерации: у 9999 нет следующего года
MAX_WEEK_YEAR: Final[int] = date.max.year

_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MILLI: Final[timedelta] = timedelta(milliseconds=1)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidCalendarDate(ValueError):
    """
    Поля даты вне допустимого диапазона (например, 32 июля).

    Ошибка программиста: значение отклоняется, а не корректируется.
    """
    pass


# =============================================================================
# INSTANT <-> LOCAL DATE
# =============================================================================


def local_datetime(instant_ms: int, policy: WeekPolicy) -> datetime:
    """Локальное время instant в часовом поясе политики"""
    return (_EPOCH + timedelta(milliseconds=instant_ms)).astimezone(policy.zone())


def local_date(instant_ms: int, policy: WeekPolicy) -> date:
    """
    Календарная дата instant в часовом поясе политики.

    Args:
        instant_ms: Unix timestamp (миллисекунды)
        policy: Политика нумерации (используется tz_name)

    Returns:
        Локальная дата
    """
    return local_datetime(instant_ms, policy).date()


def date_to_instant(d: date, policy: WeekPolicy) -> int:
    """Instant локальной полуночи даты d (миллисекунды)"""
    midnight = datetime.combine(d, time.min, tzinfo=policy.zone())
    return (midnight - _EPOCH) // _ONE_MILLI


def instant_from_date(year: int, month: int, day: int, policy: WeekPolicy) -> int:
    """
    Instant локальной полуночи для явной тройки (год, месяц, день).

    Месяц 1-based (1 = январь).

    Raises:
        InvalidCalendarDate: Если тройка не образует существующую дату
    """
    try:
        d = date(year, month, day)
    except ValueError as e:
        raise InvalidCalendarDate(
            f"Invalid calendar date {year:04d}-{month:02d}-{day:02d}: {e}"
        ) from e
    return date_to_instant(d, policy)


# =============================================================================
# WEEK BOUNDARIES
# =============================================================================


def days_from_week_start(d: date, policy: WeekPolicy) -> int:
    """Сколько дней прошло от начала недели политики (0-6)"""
    return (d.isoweekday() - policy.first_day_of_week) % DAYS_PER_WEEK


def week_start(d: date, policy: WeekPolicy) -> date:
    """Первый день недели политики, содержащей d"""
    return d - timedelta(days=days_from_week_start(d, policy))


def week_end(d: date, policy: WeekPolicy) -> date:
    """Последний день недели политики, содержащей d"""
    return week_start(d, policy) + timedelta(days=DAYS_PER_WEEK - 1)


def week_bounds(instant_ms: int, policy: WeekPolicy) -> tuple[date, date]:
    """
    Первый и последний день недели, содержащей instant.

    Returns:
        (first_day, last_day) включительно
    """
    d = local_date(instant_ms, policy)
    return week_start(d, policy), week_end(d, policy)


def _first_qualifying_week_start(period_start: date, policy: WeekPolicy) -> date:
    """Начало первой недели, в которой не меньше minimal_days дней периода"""
    start = week_start(period_start, policy)
    days_inside = DAYS_PER_WEEK - (period_start - start).days
    if days_inside >= policy.minimal_days_in_first_week:
        return start
    return start + timedelta(days=DAYS_PER_WEEK)


def first_week_start(week_year: int, policy: WeekPolicy) -> date:
    """
    Первый день недели 1 года нумерации week_year.

    Может выпадать на конец декабря предыдущего календарного года.
    """
    return _first_qualifying_week_start(date(week_year, 1, 1), policy)


def weeks_in_year(week_year: int, policy: WeekPolicy) -> int:
    """Количество недель в году нумерации (52 или 53)"""
    if week_year >= MAX_WEEK_YEAR:
        return week_identity_of_date(date.max, policy).week_number
    span = first_week_start(week_year + 1, policy) - first_week_start(week_year, policy)
    return span.days // DAYS_PER_WEEK


def identity_start(identity: WeekIdentity, policy: WeekPolicy) -> date:
    """
    Первый день недели identity.

    Raises:
        ValueError: Если неделя не существует в этом году нумерации (например, W53)
    """
    if not week_exists(identity, policy):
        raise ValueError(
            f"Week {identity.label()} does not exist: "
            f"{identity.week_year} has {weeks_in_year(identity.week_year, policy)} weeks"
        )
    offset = timedelta(days=(identity.week_number - 1) * DAYS_PER_WEEK)
    return first_week_start(identity.week_year, policy) + offset


def week_exists(identity: WeekIdentity, policy: WeekPolicy) -> bool:
    """True, если неделя identity есть в году нумерации политики"""
    return identity.week_number <= weeks_in_year(identity.week_year, policy)


# =============================================================================
# WEEK IDENTITY
# =============================================================================


def week_identity_of_date(d: date, policy: WeekPolicy) -> WeekIdentity:
    """
    WeekIdentity календарной даты.

    Последние дни MAX_WEEK_YEAR остаются в этом году, даже если политика
    отнесла бы их к неделе 1 следующего года.
    """
    start = week_start(d, policy)

    if d.year < MAX_WEEK_YEAR and start >= first_week_start(d.year + 1, policy):
        return WeekIdentity(week_number=1, week_year=d.year + 1)

    week_year = d.year
    first = first_week_start(week_year, policy)
    if start < first:
        week_year -= 1
        first = first_week_start(week_year, policy)

    return WeekIdentity(
        week_number=(start - first).days // DAYS_PER_WEEK + 1,
        week_year=week_year,
    )


def week_identity_of(instant_ms: int, policy: WeekPolicy) -> WeekIdentity:
    """
    WeekIdentity instant по политике.

    Args:
        instant_ms: Unix timestamp (миллисекунды)
        policy: Политика нумерации

    Returns:
        (week_number, week_year)

    Examples:
        >>> week_identity_of(1752932126000, ISO_POLICY).label()  # doctest: +SKIP
        '2025-W29'
    """
    return week_identity_of_date(local_date(instant_ms, policy), policy)


def same_week(a: WeekIdentity, b: WeekIdentity) -> bool:
    """True тогда и только тогда, когда совпадают номер недели и год нумерации"""
    return a.week_number == b.week_number and a.week_year == b.week_year


def offset_weeks(instant_ms: int, n: int) -> int:
    """
    Сдвиг instant ровно на n * 7 суток.

    Не зависит от календаря: offset_weeks(offset_weeks(t, n), -n) == t.
    """
    return instant_ms + n * MILLIS_PER_WEEK


def week_identity_for_offset(now_ms: int, n: int, policy: WeekPolicy) -> WeekIdentity:
    """
    WeekIdentity недели, отстоящей от текущей на n недель.

    Сдвиг выполняется по локальной дате, поэтому переход на летнее время
    не переносит полночь понедельника в предыдущее воскресенье.
    """
    target = local_date(now_ms, policy) + timedelta(days=n * DAYS_PER_WEEK)
    return week_identity_of_date(target, policy)


def weeks_between(start_ms: int, end_ms: int, policy: WeekPolicy) -> int:
    """
    Знаковое число недель от недели start до недели end.

    0 — одна неделя, -1 — end в предыдущей неделе относительно start.
    """
    start_week = week_start(local_date(start_ms, policy), policy)
    end_week = week_start(local_date(end_ms, policy), policy)
    return (end_week - start_week).days // DAYS_PER_WEEK


# =============================================================================
# CALENDAR FIELDS
# =============================================================================


def week_of_month(instant_ms: int, policy: WeekPolicy) -> int:
    """
    Номер недели внутри месяца по той же политике.

    Неделя 1 месяца — первая неделя, в которой не меньше minimal_days дней месяца.
    Дни до неё возвращают 0 (возможно только при minimal_days > 1).
    """
    d = local_date(instant_ms, policy)
    first = _first_qualifying_week_start(d.replace(day=1), policy)
    start = week_start(d, policy)
    if start < first:
        return 0
    return (start - first).days // DAYS_PER_WEEK + 1


def day_of_week(instant_ms: int, policy: WeekPolicy) -> Weekday:
    """День недели instant (нумерация ISO)"""
    return Weekday(local_date(instant_ms, policy).isoweekday())


def day_of_week_index(instant_ms: int, policy: WeekPolicy) -> int:
    """Позиция дня внутри недели политики (1 = first_day_of_week, 7 = последний)"""
    return days_from_week_start(local_date(instant_ms, policy), policy) + 1
