"""
Routing demo - entry point.

    python ui.py midi_inputs [channelOffset]

Runs one routing device (io type + optional zero-based channel offset) with
its type and channel menus against an in-memory Live set.
"""

import sys

import showlog
from core.app import RoutingApp


def main(argv=None):
    """
    Application entry point.

    argv mirrors the host's argument list: [script, io_type, (offset)].
    Bad arguments are reported by the device's init and leave the menus empty.
    """
    args = list(sys.argv if argv is None else argv)
    app = RoutingApp(args)
    try:
        app.initialize()
        app.run()
    except KeyboardInterrupt:
        showlog.info("[APP] Interrupted")
    finally:
        app.cleanup()


if __name__ == "__main__":
    main()
