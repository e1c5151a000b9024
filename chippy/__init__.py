#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from importlib import import_module
from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_CLOCK_SPEED, DEFAULT_KEYMAP, SUPPORTED_ISAS
from .cpu import CPU
from .debugger import Debugger
from .driver import Driver
from .hostio import Loader
from .state import MachineState


class StartupError(Exception):
    pass


def load_instruction_set(arch):
    module_name = SUPPORTED_ISAS.get(arch)

    if module_name is None:
        raise StartupError("Unsupported instruction set '{}'.".format(arch))

    return import_module(".isa.{}".format(module_name), __name__).InstructionSet()


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    opt_renderer = args["renderer"]
    auto_select_renderer = opt_renderer is None  # If necessary, try PyGame first, then Curses.

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if auto_select_renderer:
                opt_renderer = "curses"
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

    if opt_renderer == "curses":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import curses
        except ImportError:
            if auto_select_renderer:
                raise StartupError(
                    "Neither PyGame nor Curses (or Windows-Curses) appear to be installed."
                )

            raise StartupError(
                "Curses (or Windows-Curses) does not appear to be installed."
            )
        else:
            from .inputs.i_curses import Inputs
            from .renderers.r_curses import Renderer

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer

    instruction_set = load_instruction_set(args["arch"])

    # Build a fresh machine, with the system font already in memory, and copy the ROM in at 0x200.  Oversized ROMs
    # are truncated, but an unreadable file is fatal.
    state = MachineState()
    state.load_program(Loader().load_binary(args["filename"]))

    renderer = Renderer(
        scale=args["scale"],
        pygame_palette=args["pygame_palette"],
        curses_cursor_mode=args["curses_cursor_mode"]
    )

    # Set up host inputs, and link to the chosen rendering module in case it provides inputs too
    try:
        inputs = Inputs(args["keymap"] or DEFAULT_KEYMAP, renderer)
    except Exception:
        renderer.shutdown()
        raise

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])

    cpu = CPU(state, instruction_set, debugger)
    clock_speed = DEFAULT_CLOCK_SPEED if args["clock_speed"] is None else args["clock_speed"]

    try:
        Driver(cpu, renderer, inputs, clock_speed).run()
    finally:
        # The CPU has quit, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        inputs.shutdown()
        renderer.shutdown()

    if args["dump_screen"]:
        print(state.framebuffer.to_text())

    return state
