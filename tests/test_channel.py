import random

from convsim.bitset import BitSet
from convsim.channel import Channel


class _SequenceRng:
    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values)


def _message():
    return BitSet.from_string("0101000100110110")


def test_zero_probability_leaves_message_unchanged():
    ch = Channel(0.0, random.Random(10))
    msg = _message()
    assert ch.add_noise(msg) == msg


def test_full_probability_flips_every_bit():
    ch = Channel(1.0, random.Random(10))
    msg = _message()
    noisy = ch.add_noise(msg)
    assert (noisy ^ msg).count() == len(msg)


def test_length_preserved_and_input_untouched():
    ch = Channel(0.5, random.Random(3))
    msg = _message()
    before = msg.to_string()
    noisy = ch.add_noise(msg)
    assert len(noisy) == len(msg)
    assert msg.to_string() == before


def test_first_draw_controls_highest_bit():
    ch = Channel(0.5, _SequenceRng([0.0, 0.9, 0.9, 0.9]))
    noisy = ch.add_noise(BitSet(4, 0))
    assert noisy.to_string() == "4'b0001"


def test_threshold_is_inclusive():
    ch = Channel(0.25, _SequenceRng([0.25, 0.26]))
    noisy = ch.add_noise(BitSet(2, 0))
    assert noisy == BitSet(2, 0b10)


def test_same_seed_gives_same_noise():
    msg = BitSet(200, 0)
    first = Channel(0.3, random.Random(42)).add_noise(msg)
    second = Channel(0.3, random.Random(42)).add_noise(msg)
    assert first == second


def test_probability_can_be_changed():
    ch = Channel(0.0, random.Random(1))
    msg = _message()
    assert ch.add_noise(msg) == msg
    ch.prob = 1.0
    assert (ch.add_noise(msg) ^ msg).count() == len(msg)


def test_flip_rate_matches_probability():
    ch = Channel(0.5, random.Random(7))
    flipped = ch.add_noise(BitSet(10000, 0)).count()
    assert 4500 < flipped < 5500