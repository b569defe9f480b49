"""Host loop driving the processor's two clock domains.

Instructions run at the emulated CPU rate and the timers tick at 60 Hz.
Each clock keeps its own accumulator of owed cycles, so changing one rate
never changes the other.
"""

from typing import Optional

from chip8.constants import DEFAULT_INSTRUCTION_RATE, TIMER_FREQUENCY
from chip8.logging import ConsoleLogger, build_progress_bar
from chip8.processor import Processor


class HostLoop:
    """Paces ``execute_instruction`` and ``timer_interrupt`` from elapsed time.

    Attributes:
        processor: Processor being driven
        instruction_rate: Instructions per second
        timer_rate: Timer ticks per second
        instruction_count: Instructions executed so far
        tick_count: Timer ticks delivered so far
    """

    def __init__(
        self,
        processor: Processor,
        instruction_rate: float = DEFAULT_INSTRUCTION_RATE,
        timer_rate: float = TIMER_FREQUENCY,
        logger: Optional[ConsoleLogger] = None,
    ):
        if instruction_rate <= 0 or timer_rate <= 0:
            raise ValueError("clock rates must be positive")
        self.processor = processor
        self.instruction_rate = instruction_rate
        self.timer_rate = timer_rate
        self.logger = logger or ConsoleLogger(name="host")
        self.instruction_count = 0
        self.tick_count = 0
        self._instruction_debt = 0.0
        self._timer_debt = 0.0

    def advance(self, elapsed: float) -> int:
        """Run the instructions and timer ticks owed for ``elapsed`` seconds.

        Ticks and instructions are interleaved in time order, so an
        instruction only sees the ticks that fell due before it.

        Returns:
            Number of instructions executed
        """
        instruction_start = self._instruction_debt
        timer_start = self._timer_debt
        self._instruction_debt += elapsed * self.instruction_rate
        self._timer_debt += elapsed * self.timer_rate

        executed = int(self._instruction_debt)
        ticks = int(self._timer_debt)
        self._instruction_debt -= executed
        self._timer_debt -= ticks

        fired = 0
        for k in range(1, executed + 1):
            due_at = (k - instruction_start) / self.instruction_rate
            while fired < ticks and (fired + 1 - timer_start) / self.timer_rate <= due_at:
                self._tick()
                fired += 1
            self.processor.execute_instruction()
            self.instruction_count += 1
        for _ in range(ticks - fired):
            self._tick()
        return executed

    def _tick(self) -> None:
        self.processor.timer_interrupt()
        self.tick_count += 1

    def run_frames(
        self,
        frames: int,
        frame_time: float = 1 / TIMER_FREQUENCY,
        progress: bool = False,
    ) -> int:
        """Advance ``frames`` fixed frames without real-time pacing.

        Returns:
            Number of instructions executed
        """
        update, close = build_progress_bar(frames) if progress else (None, None)
        executed = 0
        try:
            for _ in range(frames):
                executed += self.advance(frame_time)
                if update:
                    update(1)
        finally:
            if close:
                close()
        self.logger.info(
            f"Ran {frames} frames: {self.instruction_count} instructions, "
            f"{self.tick_count} timer ticks"
        )
        return executed
