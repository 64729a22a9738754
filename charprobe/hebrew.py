"""Helper prober that tells logical from visual Hebrew by final letters."""

from __future__ import annotations

from charprobe.base import CharSetProber, ProbingState

LOGICAL_HEBREW_NAME = "windows-1255"
VISUAL_HEBREW_NAME = "ISO-8859-8"

# windows-1255 / ISO-8859-8 code points of interest
FINAL_KAF = 0xEA
NORMAL_KAF = 0xEB
FINAL_MEM = 0xED
NORMAL_MEM = 0xEE
FINAL_NUN = 0xEF
NORMAL_NUN = 0xF0
FINAL_PE = 0xF3
NORMAL_PE = 0xF4
FINAL_TSADI = 0xF5
NORMAL_TSADI = 0xF6

# Below this final-letter score difference the final letters alone do not decide.
MIN_FINAL_CHAR_DISTANCE = 5
# Below this model score difference the model scores are not relied on at all.
MIN_MODEL_DISTANCE = 0.01

_SPACE = 0x20

_FINALS = frozenset({FINAL_KAF, FINAL_MEM, FINAL_NUN, FINAL_PE, FINAL_TSADI})
# The normal tsadi is left out: words such as 'lechotet' end in an apostrophe
# after it, which filtering turns into a space.
_NON_FINALS = frozenset({NORMAL_KAF, NORMAL_MEM, NORMAL_NUN, NORMAL_PE})


def _is_final(byte: int) -> bool:
    return byte in _FINALS


def _is_non_final(byte: int) -> bool:
    return byte in _NON_FINALS


class HebrewProber(CharSetProber):
    """Decides between logical and visual Hebrew for two model probers.

    It never identifies a charset by itself: its confidence is always 0.0.
    The two model probers (logical and visual) tell whether the text is
    Hebrew at all; this prober combines their scores with final-letter
    evidence to name the charset. Input is expected to be filtered so that
    words are separated by single spaces.
    """

    def __init__(self) -> None:
        self._logical: CharSetProber | None = None
        self._visual: CharSetProber | None = None
        self.reset()

    def set_model_probers(self, logical: CharSetProber, visual: CharSetProber) -> None:
        """Attach the logical and visual model probers."""
        self._logical = logical
        self._visual = visual

    def _model_probers(self) -> tuple[CharSetProber, CharSetProber]:
        if self._logical is None or self._visual is None:
            raise RuntimeError("model probers have not been set")
        return self._logical, self._visual

    def reset(self) -> None:
        self._final_char_logical_score = 0
        self._final_char_visual_score = 0
        # Start as if a word delimiter preceded the data.
        self._prev = _SPACE
        self._before_prev = _SPACE

    def feed(self, data: bytes) -> ProbingState:
        """Count final-letter evidence; keeps detecting until both models give up."""
        if self.state() is ProbingState.NOT_ME:
            return ProbingState.NOT_ME

        for cur in data:
            if cur == _SPACE:
                # A word just ended; it is longer than one letter.
                if self._before_prev != _SPACE:
                    if _is_final(self._prev):
                        self._final_char_logical_score += 1
                    elif _is_non_final(self._prev):
                        self._final_char_visual_score += 1
            elif self._before_prev == _SPACE and _is_final(self._prev):
                # A word starting with a final letter.
                self._final_char_visual_score += 1
            self._before_prev = self._prev
            self._prev = cur

        return ProbingState.DETECTING

    def charset_name(self) -> str:
        finalsub = self._final_char_logical_score - self._final_char_visual_score
        if finalsub >= MIN_FINAL_CHAR_DISTANCE:
            return LOGICAL_HEBREW_NAME
        if finalsub <= -MIN_FINAL_CHAR_DISTANCE:
            return VISUAL_HEBREW_NAME

        logical, visual = self._model_probers()
        modelsub = logical.confidence() - visual.confidence()
        if modelsub > MIN_MODEL_DISTANCE:
            return LOGICAL_HEBREW_NAME
        if modelsub < -MIN_MODEL_DISTANCE:
            return VISUAL_HEBREW_NAME

        if finalsub < 0:
            return VISUAL_HEBREW_NAME
        return LOGICAL_HEBREW_NAME

    def confidence(self) -> float:
        return 0.0

    def state(self) -> ProbingState:
        logical, visual = self._model_probers()
        if logical.state() is ProbingState.NOT_ME and visual.state() is ProbingState.NOT_ME:
            return ProbingState.NOT_ME
        return ProbingState.DETECTING