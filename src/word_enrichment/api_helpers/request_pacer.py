"""Request pacing for the dictionary and translation services.

Both upstream services apply per-caller quotas keyed by call rate. The pacer
inserts a fixed pause before every external call so that calls are strictly
serialized with a known gap between them.
"""

import asyncio

DEFAULT_INTERVAL_SECONDS = 1.0


class RequestPacer:
    """Fixed-interval pacer awaited before each external request.

    The pacer holds no state besides its interval; it does not track previous
    calls. One instance is created per pipeline run and shared by every
    adapter call made during that run.

    Args:
        interval_seconds: Pause inserted before each request. Non-positive
            values disable the pause (useful in tests).
    """

    def __init__(self, interval_seconds: float = DEFAULT_INTERVAL_SECONDS) -> None:
        self._interval = float(interval_seconds)

    @property
    def interval_seconds(self) -> float:
        return self._interval

    async def wait(self) -> None:
        """Sleep for the configured interval.

        Returns:
            None
        """
        if self._interval > 0:
            await asyncio.sleep(self._interval)
