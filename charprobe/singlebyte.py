"""Single-byte charset detection from letter-pair frequency statistics."""

from __future__ import annotations

from dataclasses import dataclass

from charprobe.base import CharSetProber, ProbingState

SAMPLE_SIZE = 64
SB_ENOUGH_REL_THRESHOLD = 1024
POSITIVE_SHORTCUT_THRESHOLD = 0.95
NEGATIVE_SHORTCUT_THRESHOLD = 0.05
SYMBOL_CAT_ORDER = 250
NUMBER_OF_SEQ_CAT = 4
POSITIVE_CAT = NUMBER_OF_SEQ_CAT - 1
NEGATIVE_CAT = 0


@dataclass(frozen=True)
class SequenceModel:
    """Letter-pair statistics for one single-byte charset.

    ``char_to_order_map`` gives each byte its frequency order; orders below
    ``SAMPLE_SIZE`` are sampled letters. ``precedence_matrix`` gives, for each
    pair of sampled orders, a sequence category from 0 (negative) to 3
    (positive).
    """

    char_to_order_map: bytes
    precedence_matrix: bytes
    typical_positive_ratio: float
    keep_english_letter: bool
    charset_name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "char_to_order_map", bytes(self.char_to_order_map))
        object.__setattr__(self, "precedence_matrix", bytes(self.precedence_matrix))
        if len(self.char_to_order_map) != 256:
            raise ValueError("char_to_order_map must have 256 entries")
        if len(self.precedence_matrix) != SAMPLE_SIZE * SAMPLE_SIZE:
            raise ValueError(f"precedence_matrix must have {SAMPLE_SIZE * SAMPLE_SIZE} entries")
        if any(cat >= NUMBER_OF_SEQ_CAT for cat in self.precedence_matrix):
            raise ValueError("precedence_matrix holds an unknown sequence category")


class SingleByteCharSetProber(CharSetProber):
    """Scores input by how often its letter pairs are common in the model.

    With ``reversed`` set, each pair is looked up backwards, which turns a
    logical-order model into one for visually ordered text. A ``name_prober``,
    when given, decides the reported charset name.
    """

    def __init__(
        self,
        model: SequenceModel,
        reversed: bool = False,
        name_prober: CharSetProber | None = None,
    ) -> None:
        self._model = model
        self._reversed = reversed
        self._name_prober = name_prober
        self.reset()

    def reset(self) -> None:
        self._state = ProbingState.DETECTING
        self._last_order = 255
        self._seq_counters = [0] * NUMBER_OF_SEQ_CAT
        self._total_seqs = 0
        self._total_char = 0
        self._freq_char = 0

    def feed(self, data: bytes) -> ProbingState:
        order_map = self._model.char_to_order_map
        matrix = self._model.precedence_matrix
        for byte in data:
            order = order_map[byte]
            if order < SYMBOL_CAT_ORDER:
                self._total_char += 1
            if order < SAMPLE_SIZE:
                self._freq_char += 1
                if self._last_order < SAMPLE_SIZE:
                    self._total_seqs += 1
                    if self._reversed:
                        index = order * SAMPLE_SIZE + self._last_order
                    else:
                        index = self._last_order * SAMPLE_SIZE + order
                    self._seq_counters[matrix[index]] += 1
            self._last_order = order

        if self._state is ProbingState.DETECTING and self._total_seqs > SB_ENOUGH_REL_THRESHOLD:
            cf = self.confidence()
            if cf > POSITIVE_SHORTCUT_THRESHOLD:
                self._state = ProbingState.FOUND_IT
            elif cf < NEGATIVE_SHORTCUT_THRESHOLD:
                self._state = ProbingState.NOT_ME
        return self._state

    def confidence(self) -> float:
        if self._total_seqs == 0:
            return 0.01
        ratio = self._seq_counters[POSITIVE_CAT] / self._total_seqs
        ratio /= self._model.typical_positive_ratio
        ratio = ratio * self._freq_char / self._total_char
        return min(ratio, 0.99)

    def charset_name(self) -> str:
        if self._name_prober is None:
            return self._model.charset_name
        return self._name_prober.charset_name()

    def state(self) -> ProbingState:
        return self._state

    def keep_english_letters(self) -> bool:
        """Whether the model's script uses English letters (never acted on)."""
        return self._model.keep_english_letter