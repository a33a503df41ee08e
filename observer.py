import logging

logger = logging.getLogger(__name__)


class Observer:
    """Observer interface."""

    def receive(self, value):
        raise NotImplementedError("Observer subclasses must implement 'receive' method.")


class _Registration:
    """One attach of one observer; identity tells registrations apart."""

    __slots__ = ("observer",)

    def __init__(self, observer):
        self.observer = observer


class Subject:
    """Base class for observable objects.

    Observers are kept in attach order and are not owned by the subject.
    The same observer may be attached more than once and then receives
    one delivery per registration.
    """

    def __init__(self):
        self._observers = []
        self._live = set()
        self._state = None

    def __len__(self):
        return len(self._observers)

    def attach(self, observer: Observer):
        registration = _Registration(observer)
        self._observers.append(registration)
        self._live.add(registration)
        logger.debug(f"Attached {type(observer).__name__} ({len(self._observers)} registered)")

    def detach(self, observer: Observer):
        """Remove the first registration of ``observer``; no-op if absent."""
        for index, registration in enumerate(self._observers):
            if registration.observer is observer:
                del self._observers[index]
                self._live.discard(registration)
                logger.debug(f"Detached {type(observer).__name__} ({len(self._observers)} registered)")
                return

    def get_state(self):
        return self._state

    def set_state(self, value):
        self._state = value
        self.notify()

    def notify(self):
        """Push the current state to every observer, in attach order.

        Only registrations present when the call starts are delivered, and
        one removed by an earlier observer is skipped when its turn comes.
        Re-attaching during the round creates a new registration, which
        waits for the next round.
        """
        snapshot = list(self._observers)
        logger.debug(f"Notifying {len(snapshot)} observers with {self._state!r}")
        for registration in snapshot:
            if registration not in self._live:
                continue
            registration.observer.receive(self._state)
