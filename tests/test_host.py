"""Tests for the host loop's decoupled clocks."""

import pytest
from chip8 import Processor, ProcessorConfig, UnrecognizedOpcode
from chip8.host import HostLoop


@pytest.fixture
def spinning_processor():
    """Processor parked on a jump-to-self loop."""
    processor = Processor(ProcessorConfig(delay_timer=40))
    processor.load(bytes.fromhex("1200"))
    return processor


def test_advance_runs_both_clocks(spinning_processor):
    host = HostLoop(spinning_processor, instruction_rate=120)

    executed = host.advance(0.25)

    assert executed == 30
    assert host.instruction_count == 30
    assert host.tick_count == 15
    assert spinning_processor.delay_timer == 25


def test_ticks_interleave_with_instructions():
    """Each read of DT sees only the ticks that fell due before it."""
    processor = Processor(ProcessorConfig(delay_timer=40))
    processor.load(bytes.fromhex("F107F207F307F4071208"))
    host = HostLoop(processor, instruction_rate=16)

    assert host.advance(0.25) == 4

    assert [int(v) for v in processor.registers[1:5]] == [37, 33, 29, 25]
    assert host.tick_count == 15


def test_timer_rate_independent_of_instruction_rate(spinning_processor):
    host = HostLoop(spinning_processor, instruction_rate=8)

    host.advance(0.25)

    assert host.instruction_count == 2
    assert spinning_processor.delay_timer == 25


def test_fractional_cycles_carry_over(spinning_processor):
    host = HostLoop(spinning_processor, instruction_rate=6)

    assert host.advance(0.25) == 1
    assert host.advance(0.25) == 2
    assert host.instruction_count == 3


def test_run_frames(spinning_processor):
    host = HostLoop(spinning_processor, instruction_rate=8)

    executed = host.run_frames(4, frame_time=0.25)

    assert executed == 8
    assert host.tick_count == 60
    assert spinning_processor.delay_timer == 0


def test_run_frames_with_progress(spinning_processor):
    host = HostLoop(spinning_processor, instruction_rate=4)

    assert host.run_frames(2, frame_time=0.5, progress=True) == 4


def test_processor_errors_propagate():
    processor = Processor()
    processor.load(bytes.fromhex("0000"))
    host = HostLoop(processor, instruction_rate=4)

    with pytest.raises(UnrecognizedOpcode):
        host.advance(1.0)


@pytest.mark.parametrize("rates", [{"instruction_rate": 0}, {"timer_rate": -60}])
def test_invalid_rates(spinning_processor, rates):
    with pytest.raises(ValueError):
        HostLoop(spinning_processor, **rates)
