"""
Периодический таймер для шагов игры.

Время подаётся снаружи через advance(ms) - в игре это clock.tick(),
в тестах просто числа. Сам таймер ничего не ждёт и потоков не создаёт.
"""
import logging

logger = logging.getLogger(__name__)


class IntervalTicker:
    def __init__(self, callback):
        self.callback = callback
        self.interval = None
        self.elapsed = 0
        self.running = False

    def start(self, interval):
        """(Пере)запуск с новым интервалом. Старый отсчёт сбрасывается."""
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.stop()
        self.interval = interval
        self.elapsed = 0
        self.running = True
        logger.debug("Ticker started at %d ms", interval)

    def stop(self):
        if self.running:
            logger.debug("Ticker stopped")
        self.running = False
        self.elapsed = 0

    def advance(self, ms):
        """
        Прошло ms миллисекунд. Не больше одного вызова callback за раз,
        лишнее накопленное время отбрасывается.
        Возвращает число вызовов (0 или 1).
        """
        if not self.running:
            return 0

        self.elapsed += ms
        if self.elapsed < self.interval:
            return 0

        self.elapsed = 0
        self.callback()
        return 1
