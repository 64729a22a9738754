import pytest

from charprobe.base import CharSetProber, ProbingState
from charprobe.singlebyte import SequenceModel, SingleByteCharSetProber


def _order_map():
    table = [255] * 256
    for byte in range(0x40, 0x80):
        table[byte] = byte - 0x40
    for byte in range(ord("0"), ord("9") + 1):
        table[byte] = 100
    return bytes(table)


def _model(matrix, ratio=1.0, keep=False, name="toy-charset"):
    return SequenceModel(_order_map(), bytes(matrix), ratio, keep, name)


def _uniform(category):
    return [category] * (64 * 64)


def _ascending():
    # Category 3 when the first letter's order is below the second's.
    return [3 if a < b else 0 for a in range(64) for b in range(64)]


class _NameStub(CharSetProber):
    def feed(self, data):
        return ProbingState.DETECTING

    def reset(self):
        pass

    def confidence(self):
        return 0.0

    def charset_name(self):
        return "decided-elsewhere"

    def state(self):
        return ProbingState.DETECTING


def test_model_rejects_short_order_map():
    with pytest.raises(ValueError):
        SequenceModel(b"\x00" * 10, bytes(_uniform(0)), 1.0, False, "x")


def test_model_rejects_wrong_matrix_size():
    with pytest.raises(ValueError):
        SequenceModel(_order_map(), b"\x00" * 10, 1.0, False, "x")


def test_model_rejects_unknown_category():
    with pytest.raises(ValueError):
        SequenceModel(_order_map(), bytes(_uniform(7)), 1.0, False, "x")


def test_initial_state_and_confidence():
    prober = SingleByteCharSetProber(_model(_uniform(3)))
    assert prober.state() is ProbingState.DETECTING
    assert prober.confidence() == 0.01


def test_positive_text_is_capped_and_found():
    prober = SingleByteCharSetProber(_model(_uniform(3)))
    state = prober.feed(b"A" * 1100)
    assert state is ProbingState.FOUND_IT
    assert prober.confidence() == 0.99


def test_negative_text_is_rejected():
    prober = SingleByteCharSetProber(_model(_uniform(0)))
    state = prober.feed(b"A" * 1100)
    assert state is ProbingState.NOT_ME
    assert prober.confidence() == 0.0


def test_below_threshold_stays_detecting():
    prober = SingleByteCharSetProber(_model(_uniform(0)))
    assert prober.feed(b"A" * 100) is ProbingState.DETECTING


def test_reversed_lookup_flips_pairs():
    forward = SingleByteCharSetProber(_model(_ascending()))
    backward = SingleByteCharSetProber(_model(_ascending()), reversed=True)
    forward.feed(b"AB")
    backward.feed(b"AB")
    assert forward.confidence() == 0.99
    assert backward.confidence() == 0.0


def test_non_sample_chars_lower_confidence():
    pure = SingleByteCharSetProber(_model(_uniform(3)))
    mixed = SingleByteCharSetProber(_model(_uniform(3)))
    pure.feed(b"ABCD")
    mixed.feed(b"AB12CD")
    assert 0.0 < mixed.confidence() < pure.confidence()


def test_symbols_do_not_count():
    plain = SingleByteCharSetProber(_model(_uniform(3), ratio=2.0))
    symbols = SingleByteCharSetProber(_model(_uniform(3), ratio=2.0))
    plain.feed(b"AB")
    symbols.feed(b"A B")
    # The space (order 255) breaks the pair but adds no characters.
    assert plain.confidence() > 0.0
    assert symbols.confidence() == 0.01


def test_chunked_feed_matches_whole_feed():
    data = b"ABCA12DEFGHI" * 20
    whole = SingleByteCharSetProber(_model(_ascending()))
    chunked = SingleByteCharSetProber(_model(_ascending()))
    whole.feed(data)
    for start in range(0, len(data), 7):
        chunked.feed(data[start:start + 7])
    assert chunked.confidence() == whole.confidence()


def test_reset_restores_initial_state():
    prober = SingleByteCharSetProber(_model(_uniform(0)))
    prober.feed(b"A" * 1100)
    prober.reset()
    assert prober.state() is ProbingState.DETECTING
    assert prober.confidence() == 0.01


def test_charset_name_from_model():
    prober = SingleByteCharSetProber(_model(_uniform(3), name="toy-charset"))
    assert prober.charset_name() == "toy-charset"


def test_charset_name_from_name_prober():
    prober = SingleByteCharSetProber(_model(_uniform(3)), False, _NameStub())
    assert prober.charset_name() == "decided-elsewhere"


def test_keep_english_letters_follows_model():
    assert SingleByteCharSetProber(_model(_uniform(3), keep=True)).keep_english_letters() is True
    assert SingleByteCharSetProber(_model(_uniform(3), keep=False)).keep_english_letters() is False