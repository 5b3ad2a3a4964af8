"""Process entry point for todolist."""

import logging
import sys
import time
import traceback

from todolist.config import load_config
from todolist.logging_utils import log_event, setup_logging
from todolist.repository import Repository
from todolist.storage import open_database
from todolist.tui.app import run_tui
from todolist.tui.state import create_initial_state


def _uptime_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)


def main() -> None:
    """Load configuration, open the database and run the TUI."""
    app_started = time.perf_counter()
    debug = False
    conn = None

    try:
        config = load_config()
        debug = config.debug
        setup_logging(config.log_path)

        conn = open_database(config.database_path)
        state = create_initial_state(Repository(conn))

        log_event(
            "app_start",
            level=logging.INFO,
            database=config.database_path,
            log_file=config.log_path,
            debug=config.debug,
        )

        run_tui(state)

        log_event(
            "app_stop",
            level=logging.INFO,
            reason="normal",
            uptime_ms=_uptime_ms(app_started),
        )

    except KeyboardInterrupt:
        log_event(
            "app_stop",
            level=logging.INFO,
            reason="keyboard_interrupt",
            uptime_ms=_uptime_ms(app_started),
        )
        print("\nInterrupted")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}")
        if debug:
            traceback.print_exc()
        log_event(
            "app_stop",
            level=logging.ERROR,
            reason="fatal_error",
            error_type=type(e).__name__,
            error=str(e),
            uptime_ms=_uptime_ms(app_started),
        )
        logging.error("Fatal error: %s", e, exc_info=True)
        sys.exit(1)
    finally:
        if conn is not None:
            conn.close()


if __name__ == "__main__":
    main()
