"""CoalescingWriter — отложенная запись с объединением частых изменений.

Каждое новое значение отменяет ожидающую запись и перезапускает период
тишины. Запись выполняется не более одного раза за период тишины и только
для последнего значения.

Таймеров и потоков нет: время задаётся явно (clock), а владелец вызывает
poll() из своего цикла событий. Это делает поведение детерминированным.
"""

import logging
import time
from typing import Callable, Generic, Optional, TypeVar

from src.core.math.numerical_safeguards import validate_non_negative

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CoalescingWriter(Generic[T]):
    """Debounce записи: submit → (тишина quiet_period) → write(последнее значение).

    States:
    - IDLE: нет ожидающего значения
    - PENDING: есть значение и дедлайн записи
    """

    def __init__(
        self,
        write: Callable[[T], object],
        quiet_period_sec: float = 0.5,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            write: функция записи (best-effort)
            quiet_period_sec: период тишины перед записью
            clock: источник монотонного времени (секунды)
        """
        validate_non_negative(quiet_period_sec, "quiet_period_sec")

        self._write = write
        self.quiet_period_sec = quiet_period_sec
        self._clock = clock

        self._pending_value: Optional[T] = None
        self._has_pending = False
        self._deadline: Optional[float] = None

        # Диагностика
        self.submitted_count = 0
        self.written_count = 0

    @property
    def has_pending(self) -> bool:
        return self._has_pending

    @property
    def deadline(self) -> Optional[float]:
        """Момент, после которого poll() выполнит запись."""
        return self._deadline

    def submit(self, value: T) -> None:
        """Новое значение: отмена ожидающей записи и перезапуск периода тишины."""
        self._pending_value = value
        self._has_pending = True
        self._deadline = self._clock() + self.quiet_period_sec
        self.submitted_count += 1

    def cancel(self) -> None:
        """Отмена ожидающей записи без выполнения."""
        self._pending_value = None
        self._has_pending = False
        self._deadline = None

    def poll(self) -> bool:
        """Запись, если период тишины истёк.

        Returns:
            True если запись была выполнена
        """
        if not self._has_pending or self._deadline is None:
            return False

        if self._clock() < self._deadline:
            return False

        return self._emit()

    def flush(self) -> bool:
        """Немедленная запись ожидающего значения (например, при закрытии экрана).

        Returns:
            True если запись была выполнена
        """
        if not self._has_pending:
            return False
        return self._emit()

    def _emit(self) -> bool:
        value = self._pending_value
        self.cancel()

        try:
            self._write(value)
        except Exception as exc:
            logger.error("Deferred write failed: %s", exc)
            return False

        self.written_count += 1
        return True
