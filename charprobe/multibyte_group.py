"""Group prober that runs several multi-byte charset probers side by side."""

from __future__ import annotations

from collections.abc import Iterable

from charprobe.base import CharSetProber, ProbingState


def _high_byte_filter(data: bytes) -> bytes:
    """Keep high bytes and the first ASCII byte after each run of them."""
    kept = bytearray()
    # Assume the byte before the data was not ASCII; this only adds noise.
    keep_next = True
    for byte in data:
        if byte & 0x80:
            kept.append(byte)
            keep_next = True
        elif keep_next:
            kept.append(byte)
            keep_next = False
    return bytes(kept)


class MultiByteGroupProber(CharSetProber):
    """Feeds filtered input to its member probers and picks the best one."""

    def __init__(self, probers: Iterable[CharSetProber]) -> None:
        self._probers = list(probers)
        if not self._probers:
            raise ValueError("a group prober needs at least one member prober")
        self.reset()

    def reset(self) -> None:
        for prober in self._probers:
            prober.reset()
        self._active = [True] * len(self._probers)
        self._active_num = len(self._probers)
        self._best_guess: int | None = None
        self._state = ProbingState.DETECTING

    def feed(self, data: bytes) -> ProbingState:
        filtered = _high_byte_filter(data)
        for index, prober in enumerate(self._probers):
            if not self._active[index]:
                continue
            st = prober.feed(filtered)
            if st is ProbingState.FOUND_IT:
                self._best_guess = index
                self._state = ProbingState.FOUND_IT
                break
            if st is ProbingState.NOT_ME:
                self._active[index] = False
                self._active_num -= 1
                if self._active_num == 0:
                    self._state = ProbingState.NOT_ME
                    break
        return self._state

    def confidence(self) -> float:
        if self._state is ProbingState.FOUND_IT:
            return 0.99
        if self._state is ProbingState.NOT_ME:
            return 0.01
        best = 0.0
        for index, prober in enumerate(self._probers):
            if not self._active[index]:
                continue
            cf = prober.confidence()
            if best < cf:
                best = cf
                self._best_guess = index
        return best

    def charset_name(self) -> str:
        if self._best_guess is None:
            self.confidence()
            if self._best_guess is None:
                self._best_guess = 0
        return self._probers[self._best_guess].charset_name()

    def state(self) -> ProbingState:
        return self._state