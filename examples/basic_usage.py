"""
Basic usage example for arealog.

Builds a service from settings, logs from two areas, changes thresholds at
runtime and forwards WARN/ERROR lines to a queue consumed by a UI thread.
"""

import queue
import sys
import threading
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from arealog import CaptureEvent, ConfigurationError, LoggingService, LoggingSettings


def main() -> int:
    try:
        settings = LoggingSettings(default_level="info", areas={"lp-1": "debug"})
        service = LoggingService.from_settings(settings)
    except (ConfigurationError, ValueError) as e:
        # The program, not the library, decides to exit on bad configuration
        print(f"invalid logging configuration: {e}", file=sys.stderr)
        return 2

    site = service.get_logger("site")
    lp = service.get_logger("lp-1")

    # Unbounded queue so a slow consumer never blocks log calls
    events: queue.Queue[CaptureEvent] = queue.Queue()
    service.install_capture(events)

    def _ui() -> None:
        while True:
            event = events.get()
            print(f"ui <- {event.key}: {event.val}")
            events.task_done()

    threading.Thread(target=_ui, daemon=True).start()

    site.info("site started")
    lp.debug("polling charger every %ds", 10)
    lp.warn('vehicle "ID.3" not responding')
    site.error("grid meter offline")

    # Live reconfiguration: existing loggers pick up the new threshold
    service.reconfigure("error")
    site.info("not shown")
    lp.debug("still shown, area override is kept")

    events.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
