# --- signals.py ---

import logging
import signal
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class DepthBumper(threading.Thread):
    """
    Waits for a single interrupt and then raises the search depth once.
    """

    def __init__(self, increase_depth: Callable[[], int]):
        super().__init__(name="depth-bumper")
        self.daemon = True

        self.increase_depth = increase_depth

        # Thread control
        self._fired_event = threading.Event()
        self._stopped = False

    def run(self):
        """The main entry point for the thread."""
        self._fired_event.wait()
        if self._stopped:
            return
        self.increase_depth()

    def fire(self):
        """Wakes the thread so it bumps the depth. Later calls do nothing."""
        self._fired_event.set()

    def stop(self):
        """Releases the thread without bumping the depth."""
        self._stopped = True
        self._fired_event.set()


def install_interrupt_handler(bumper: DepthBumper, signum: int = signal.SIGINT) -> Optional[Callable]:
    """
    Routes the first `signum` to `bumper.fire()`. The previous handler is
    put back as soon as the signal arrives, so a second interrupt behaves
    as it did before installation.

    Returns the previous handler so the caller can restore it.
    """
    previous = signal.getsignal(signum)
    if previous is None:
        # Installed outside Python; the closest we can restore is the default
        previous = signal.SIG_DFL

    def _handler(received, frame):
        signal.signal(signum, previous)
        logger.info("Received signal %d, raising search depth", received)
        bumper.fire()

    signal.signal(signum, _handler)
    return previous
