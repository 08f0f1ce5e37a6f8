# clock.py
import logging

logger = logging.getLogger(__name__)


class TickController:
    """
    Fixed-rate simulation clock, independent of the render rate.

    Nothing steps until start_delay_ms has passed since start_ms; the first
    step is due the moment the delay ends. After that a step is due whenever
    interval_ms has elapsed since the last tick; a stalled frame simply
    finds several steps due. Each tick shrinks the interval by
    decrement_ms, never below floor_ms.
    """

    def __init__(self, start_ms: int, start_delay_ms: int, interval_ms: int,
                 floor_ms: int, decrement_ms: int):
        self.start_ms = start_ms
        self.start_delay_ms = start_delay_ms
        self.interval_ms = interval_ms
        self.floor_ms = floor_ms
        self.decrement_ms = decrement_ms
        # Backdated one interval so the first step lands exactly at the end of the delay
        self.last_tick_ms = start_ms + start_delay_ms - interval_ms
        self.steps = 0

    @classmethod
    def from_config(cls, cfg, start_ms: int) -> "TickController":
        return cls(
            start_ms=start_ms,
            start_delay_ms=cfg.start_delay_ms,
            interval_ms=cfg.step_ms,
            floor_ms=cfg.min_step_ms,
            decrement_ms=cfg.step_decrement_ms,
        )

    def started(self, now_ms: int) -> bool:
        return now_ms - self.start_ms >= self.start_delay_ms

    def due(self, now_ms: int) -> bool:
        return self.started(now_ms) and now_ms - self.last_tick_ms >= self.interval_ms

    def tick(self) -> None:
        """Account for one fired step and apply the speed ramp."""
        self.last_tick_ms += self.interval_ms
        self.steps += 1
        faster = max(self.floor_ms, self.interval_ms - self.decrement_ms)
        if faster != self.interval_ms:
            self.interval_ms = faster
            if faster == self.floor_ms:
                logger.debug("Step interval reached its floor of %d ms", faster)
