from __future__ import annotations

import threading
import warnings


class DeprecationNotice:
    """
    One-shot deprecation notice.

    fire() issues the notice on its first call only; the check-and-set is
    guarded so concurrent dispatchers still warn at most once.

    The default category is FutureWarning: it is shown under the default
    warning filters whichever module triggers it, while DeprecationWarning
    is hidden outside `__main__`.
    """

    def __init__(self, message: str, category: type = FutureWarning) -> None:
        self.message = message
        self.category = category
        self._emitted = False
        self._lock = threading.Lock()

    @property
    def emitted(self) -> bool:
        return self._emitted

    @property
    def label(self) -> str:
        return self.category.__name__

    def fire(self) -> bool:
        """
        Returns True if this call issued the notice.
        """
        with self._lock:
            if self._emitted:
                return False
            self._emitted = True

        warnings.warn(self.message, self.category, stacklevel=3)
        return True


# process-wide: shared by every client in the process
INTERACTION_ALIAS_NOTICE = DeprecationNotice(
    "The interaction event is deprecated. Use interactionCreate instead",
)
