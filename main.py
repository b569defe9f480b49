"""
Run a CHIP-8 ROM in a pygame window, or headless for a fixed number of frames.
"""

import argparse
import sys
import time

import pygame

from chip8 import Chip8Error, Processor, ProcessorConfig
from chip8.constants import DEFAULT_INSTRUCTION_RATE, TIMER_FREQUENCY
from chip8.host import HostLoop
from chip8.logging import ConsoleLogger
from chip8.peripheral import Peripheral


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="CHIP-8 emulator")
    parser.add_argument("rom", help="Path to the ROM file")
    parser.add_argument("--rate", type=float, default=DEFAULT_INSTRUCTION_RATE,
                        help="Instructions per second")
    parser.add_argument("--scale", type=int, default=8, help="Window pixels per CHIP-8 pixel")
    parser.add_argument("--color-scheme", default="classic")
    parser.add_argument("--headless", type=int, metavar="FRAMES",
                        help="Run FRAMES 60 Hz frames without a window")
    parser.add_argument("--seed", type=int, default=0, help="Seed for the RND instruction")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def run_window(host: HostLoop, processor: Processor, scale: int, color_scheme: str):
    """Pygame loop: 60 frames per second, instructions paced by the host loop."""
    peripheral = Peripheral(
        frame_buffer=lambda: processor.frame_buffer,
        keydown=processor.key_pressed,
        keyup=processor.key_released,
        scale=scale,
        color_scheme=color_scheme,
    )
    clock = pygame.time.Clock()
    last = time.perf_counter()
    try:
        while peripheral.update():
            now = time.perf_counter()
            host.advance(now - last)
            last = now
            peripheral.draw()
            clock.tick(TIMER_FREQUENCY)
    finally:
        peripheral.close()


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = ConsoleLogger(name="chip8", log_level=args.log_level)

    processor = Processor(
        ProcessorConfig(beep=lambda: logger.debug("Beep"), seed=args.seed),
        logger=ConsoleLogger(name="cpu", log_level=args.log_level),
    )
    try:
        processor.load_rom(args.rom)
    except OSError as e:
        logger.error(f"Could not read ROM: {e}")
        return 1

    host = HostLoop(processor, instruction_rate=args.rate, logger=logger)
    try:
        if args.headless is not None:
            host.run_frames(args.headless, progress=True)
            logger.info(str(processor))
        else:
            run_window(host, processor, args.scale, args.color_scheme)
    except Chip8Error:
        logger.critical(f"Halted after {host.instruction_count} instructions")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
