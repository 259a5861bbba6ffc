"""
Batch — Последовательности записей для постраничного вывода

batch(start, count) возвращает записи для start, start+3, ..., маршрутизируя
каждый exponent в табличный или бесконечный кодировщик. Табличный exponent
без имени пропускается (запись не выдаётся), поэтому длина результата может
быть меньше count; в бесконечном тире пропусков нет.

Последовательность конечная и перезапускаемая: следующая страница
запрашивается новым вызовом с BatchPage.next_start_exponent.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from magnitude_namer.core.domain.record import MagnitudeRecord, is_valid_exponent
from magnitude_namer.core.domain.tables import EXPONENT_STEP, FINITE_MAX_EXPONENT, FINITE_MIN_EXPONENT
from magnitude_namer.core.naming.codec import encode

_log = logging.getLogger(__name__)


# =============================================================================
# CONFIG / RESULT
# =============================================================================


@dataclass(frozen=True)
class BatchConfig:
    """Конфигурация постраничной выдачи."""

    # Размер страницы по умолчанию (count, если не передан явно)
    page_size: int = 50

    # Первый exponent первой страницы
    origin_exponent: int = FINITE_MIN_EXPONENT

    # Верхняя граница count (None: без ограничения)
    max_page_size: Optional[int] = None

    def __post_init__(self):
        _validate_count(self.page_size, "page_size")
        if self.page_size == 0:
            raise ValueError("page_size must be positive, got 0")
        _validate_start(self.origin_exponent, "origin_exponent")
        if self.max_page_size is not None:
            _validate_count(self.max_page_size, "max_page_size")
            if self.page_size > self.max_page_size:
                raise ValueError(
                    f"page_size {self.page_size} exceeds max_page_size {self.max_page_size}"
                )


@dataclass(frozen=True)
class BatchPage:
    """Страница записей."""

    records: tuple[MagnitudeRecord, ...]
    start_exponent: int
    count: int

    # start для следующей страницы: start + 3 * count
    next_start_exponent: int

    # exponent без табличного имени (пропущены)
    skipped: tuple[int, ...] = ()

    @property
    def exponents(self) -> list[int]:
        return [record.exponent for record in self.records]

    def to_dict(self) -> dict:
        """Сериализация в формат контракта magnitude_batch.json."""
        return {
            "start_exponent": self.start_exponent,
            "count": self.count,
            "next_start_exponent": self.next_start_exponent,
            "skipped": list(self.skipped),
            "records": [record.model_dump() for record in self.records],
        }


# =============================================================================
# VALIDATION
# =============================================================================


def _validate_start(start_exponent: int, name: str = "start_exponent") -> None:
    if not is_valid_exponent(start_exponent):
        raise ValueError(
            f"{name} must be an integer multiple of {EXPONENT_STEP} >= {FINITE_MIN_EXPONENT}, "
            f"got {start_exponent!r}"
        )


def _validate_count(count: int, name: str = "count") -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"{name} must be an integer, got {count!r}")
    if count < 0:
        raise ValueError(f"{name} must be non-negative, got {count}")


# =============================================================================
# PRODUCER
# =============================================================================


class BatchProducer:
    """Постраничный генератор MagnitudeRecord.

    Не хранит состояния между вызовами: страница полностью определяется
    (start_exponent, count).
    """

    def __init__(self, config: Optional[BatchConfig] = None):
        """
        Args:
            config: Конфигурация (default: BatchConfig())
        """
        self.config = config or BatchConfig()

    def produce(self, start_exponent: int, count: Optional[int] = None) -> BatchPage:
        """
        Страница записей, начиная с start_exponent.

        Args:
            start_exponent: Первый exponent (кратный 3, ≥ 3)
            count: Количество exponent (default: config.page_size)

        Returns:
            BatchPage; len(records) ≤ count

        Raises:
            ValueError: Если start_exponent/count некорректны или count > max_page_size
        """
        if count is None:
            count = self.config.page_size
        _validate_start(start_exponent)
        _validate_count(count)
        if self.config.max_page_size is not None and count > self.config.max_page_size:
            raise ValueError(f"count {count} exceeds max_page_size {self.config.max_page_size}")

        records = []
        skipped = []
        for exponent in range(start_exponent, start_exponent + count * EXPONENT_STEP, EXPONENT_STEP):
            result = encode(exponent)
            if result.record is None:
                _log.debug("Skipping exponent %d: %s", exponent, result.error)
                skipped.append(exponent)
                continue
            records.append(result.record)

        _log.debug(
            "Produced %d records for exponents %d..%d (%d skipped)",
            len(records),
            start_exponent,
            start_exponent + max(count - 1, 0) * EXPONENT_STEP,
            len(skipped),
        )
        return BatchPage(
            records=tuple(records),
            start_exponent=start_exponent,
            count=count,
            next_start_exponent=start_exponent + count * EXPONENT_STEP,
            skipped=tuple(skipped),
        )

    def pages(self, start_exponent: Optional[int] = None, n_pages: int = 1) -> Iterator[BatchPage]:
        """
        n_pages последовательных страниц по config.page_size.

        Args:
            start_exponent: Начало первой страницы (default: config.origin_exponent)
            n_pages: Количество страниц
        """
        _validate_count(n_pages, "n_pages")
        start = self.config.origin_exponent if start_exponent is None else start_exponent
        for _ in range(n_pages):
            page = self.produce(start)
            yield page
            start = page.next_start_exponent

    def page_start_for(self, exponent: int) -> int:
        """
        start_exponent страницы, содержащей exponent.

        Страницы отсчитываются от config.origin_exponent с шагом
        3 * config.page_size.

        Raises:
            ValueError: Если exponent некорректен или меньше origin_exponent
        """
        _validate_start(exponent, "exponent")
        origin = self.config.origin_exponent
        if exponent < origin:
            raise ValueError(f"exponent {exponent} precedes origin_exponent {origin}")
        span = self.config.page_size * EXPONENT_STEP
        return origin + ((exponent - origin) // span) * span


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def batch(start_exponent: int, count: int) -> list[MagnitudeRecord]:
    """
    Записи для start_exponent, start_exponent + 3, ... (count exponent).

    Raises:
        ValueError: Если start_exponent не кратен 3 / меньше 3 или count < 0
    """
    return list(BatchProducer().produce(start_exponent, count).records)


def generate_all_finite() -> list[MagnitudeRecord]:
    """Все 101 табличные записи: 10^3 .. 10^303."""
    count = (FINITE_MAX_EXPONENT - FINITE_MIN_EXPONENT) // EXPONENT_STEP + 1
    return batch(FINITE_MIN_EXPONENT, count)
