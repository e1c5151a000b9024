#!/usr/bin/env python3

"""
Driver

Clocks the CPU at a fixed rate, and connects it to the host.  Every cycle, the
input plugin is asked for the keypad state, the CPU runs one instruction, and
if the framebuffer changed, a snapshot of it is passed to the renderer.  Host
events (including a request to quit) are only processed at display rate.

The CPU itself knows nothing about real time, so all of the timing is done
here.  Busy-waiting on perf_counter is used rather than sleeping, as sleeps on
most hosts are far too coarse for rates in the hundreds of hertz.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, DISPLAY_INTERVAL


class Driver:
    def __init__(self, cpu, renderer, inputs, clock_speed, input_interval=DISPLAY_INTERVAL):
        self.cpu = cpu
        self.renderer = renderer
        self.inputs = inputs
        # User can specify 0 for uncapped
        self.core_interval = None if clock_speed <= 0 else 1.0 / clock_speed

        # Input-related vars
        self.input_interval = input_interval
        self.next_input_time = 0

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0

        self.renderer.set_resolution(*cpu.state.framebuffer.get_vid_size())
        self.report_perf()

    def run(self, max_cycles=None):
        # Returns the number of cycles executed, once the input plugin asks to quit (or max_cycles is reached)
        cpu = self.cpu
        cycles = 0

        while max_cycles is None or cycles < max_cycles:
            this_time = perf_counter()  # Do this first for maximum precision

            # Performance counters
            if this_time >= self.next_perf_report_time:
                self.next_perf_report_time = int(this_time) + 1.0
                self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                self.perf_counter_ops = 0
                self.perf_counter_fps = 0

            # Draining host events is slow, so only do it at display rate.  The keypad is still latched every cycle.
            if this_time >= self.next_input_time:
                if self.inputs.process_messages():
                    break

                self.next_input_time = this_time + self.input_interval

            cpu.cycle(self.inputs.get_keypad())
            cycles += 1
            self.perf_counter_ops += 1

            if cpu.display_dirty():
                self.renderer.draw(cpu.get_display())
                self.renderer.refresh_display()
                self.perf_counter_fps += 1

            if self.core_interval is not None:
                # Wait for the next cycle.  Do this last for maximum precision (takes into account time spent on this
                # instruction)
                next_time = this_time + self.core_interval

                while perf_counter() < next_time:  # Unfortunately we have to do this to get the timing right
                    pass

        return cycles

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
