# charprobe

Building blocks for guessing the character encoding of a stream of bytes:
coding state machines for multi-byte encodings, a letter-pair statistics
prober for single-byte charsets, a logical/visual Hebrew helper and a group
prober that combines several probers. Only the standard library is used.

## Modules

- `charprobe.packing`: small integers packed into 32-bit words.
  `pack16bits(a, b)`, `pack8bits(a, b, c, d)` and `pack4bits(*args)` (exactly
  eight values, otherwise `ValueError`) build the words, the first value in the
  lowest bits. `PackedInt(data, width=4)` is a read-only table over those words
  for widths 4, 8 or 16 (any other width raises `ValueError`); indexing past
  the end or with a negative index raises `IndexError`.
- `charprobe.statemachine`: `StateMachineModel` holds a class table, a class
  factor, a state table, a character-length table and a name.
  `CodingStateMachine(model)` walks bytes through it: `next_state(byte)`
  returns the new state as an integer, which is `MachineState.START`,
  `MachineState.ERROR`, `MachineState.ITS_ME` or an intermediate value.
  `current_char_len()` gives the length of the character whose first byte was
  seen last, `reset()` returns to the start state and `name()` gives the
  model's name.
- `charprobe.models_cjk`: `BIG5_MODEL`, `EUCJP_MODEL`, `EUCKR_MODEL`,
  `GB18030_MODEL` and `SJIS_MODEL`, collected in `CJK_MODELS`.
- `charprobe.models_unicode`: `UTF8_MODEL`, `UCS2BE_MODEL` (`"UTF-16BE"`) and
  `UCS2LE_MODEL` (`"UTF-16LE"`), collected in `UNICODE_MODELS`.
- `charprobe.base`: the abstract `CharSetProber` and the `ProbingState` enum
  (`DETECTING`, `FOUND_IT`, `NOT_ME`).
- `charprobe.singlebyte`: `SequenceModel` and `SingleByteCharSetProber`.
- `charprobe.hebrew`: `HebrewProber`.
- `charprobe.multibyte_group`: `MultiByteGroupProber`.

## The prober interface

Every `CharSetProber` offers:

- `feed(data)`: process a chunk of `bytes` and return a `ProbingState`;
- `state()`: the current `ProbingState`;
- `confidence()`: a float from 0.0 to 1.0;
- `charset_name()`: the name of the charset it stands for;
- `reset()`: forget everything seen so far.

## Checking bytes against a state machine

```python
from charprobe.models_unicode import UTF8_MODEL
from charprobe.statemachine import CodingStateMachine, MachineState

machine = CodingStateMachine(UTF8_MODEL)
valid = all(
    machine.next_state(byte) != MachineState.ERROR
    for byte in "héllo".encode("utf-8")
)
```

## Single-byte probing

`SequenceModel(char_to_order_map, precedence_matrix, typical_positive_ratio,
keep_english_letter, charset_name)` needs a 256-byte order map and a
64 × 64 (4096-byte) precedence matrix whose entries are sequence categories
0 to 3; anything else raises `ValueError`.

`SingleByteCharSetProber(model, reversed=False, name_prober=None)` counts
consecutive pairs of sampled letters (order below 64) and the category of each
pair. Its confidence is the share of pairs in the top category, divided by the
model's typical positive ratio and scaled by the share of sampled letters among
all letters; it is 0.01 before any pair has been seen and never above 0.99.
Once more than 1024 pairs have been seen, a confidence above 0.95 sets the
state to `FOUND_IT` and one below 0.05 to `NOT_ME`. With `reversed=True` each
pair is looked up backwards. If a `name_prober` is given, `charset_name()`
asks it for the name instead of using the model's.
`keep_english_letters()` reports the model's flag; the prober does not act on
it.

## Hebrew

`HebrewProber` tells logical Hebrew (`"windows-1255"`) from visual Hebrew
(`"ISO-8859-8"`). Its confidence is always 0.0. Attach the two model probers
with `set_model_probers(logical, visual)` — typically two
`SingleByteCharSetProber` objects on the same Hebrew model, the visual one with
`reversed=True` and both with the `HebrewProber` as `name_prober`. Calling
`state()` or needing the model scores before they are attached raises
`RuntimeError`.

`feed()` counts final-letter evidence in space-separated words and stays in
`DETECTING` until both model probers report `NOT_ME`. `charset_name()` decides
by a final-letter score difference of at least 5, otherwise by a model
confidence difference above 0.01, otherwise by the sign of the final-letter
difference, defaulting to logical.

## Group probing

```python
from charprobe.multibyte_group import MultiByteGroupProber

group = MultiByteGroupProber(probers)  # any non-empty iterable of CharSetProber
state = group.feed(data)
print(group.charset_name(), group.confidence())
```

Before feeding its members, the group keeps only the bytes with the high bit
set plus the first ASCII byte after each run of them. A member that returns
`FOUND_IT` becomes the answer; a member that returns `NOT_ME` is dropped, and
when every member has been dropped the group itself is `NOT_ME`. An empty
iterable raises `ValueError`.

The group's confidence is 0.99 once a member has found a match, 0.01 once all
members have ruled themselves out, and otherwise the highest confidence among
the members still active. `charset_name()` names the best member, or the first
member when none has a confidence above zero.

## What the package does not do

There is no single call that takes bytes and returns an encoding, and no
command-line tool. The package ships no letter-pair `SequenceModel` data for
any language, and no ready-made probers for the CJK encodings or UTF-8: the
state machine models are provided, but probers that use them (and any
character-frequency analysis) have to be supplied by the caller.

## Tests

```
pip install -e .[test]
pytest
```