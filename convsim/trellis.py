"""Trellis of a feed-forward convolutional encoder, with Viterbi decoding."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .bitset import BitSet


@dataclass(eq=False)
class State:
    """One encoder state and its outgoing transitions.

    ``next_states`` maps an input word, as an integer, to the state it leads
    to and the output word emitted on the way.
    """

    index: int
    next_states: dict[int, tuple[State, BitSet]] = field(default_factory=dict)


class Trellis:
    """Encoder trellis built from a generator matrix of tap polynomials.

    The matrix has one row per input bit and one column per output bit.  Each
    polynomial holds ``reg_size + 1`` taps: bit 0 taps the incoming bit,
    higher bits tap the shift register of that input.
    """

    def __init__(
        self,
        reg_size: int,
        generator_matrix: Iterable[Iterable[BitSet | int]],
    ) -> None:
        rows = [list(row) for row in generator_matrix]
        if reg_size <= 0:
            raise ValueError("register size must be positive")
        if not rows or not rows[0]:
            raise ValueError("generator matrix must not be empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("generator matrix rows must have equal length")

        self.reg_size = reg_size
        self.height = len(rows)
        self.width = width
        self.state_size = reg_size * self.height
        self.states_num = 1 << self.state_size

        taps = [[int(poly) for poly in row] for row in rows]
        self.states: list[State] = [State(index) for index in range(self.states_num)]
        for state in self.states:
            for value in range(1 << self.height):
                output, target = self._transition(state.index, value, taps)
                state.next_states[value] = (
                    self.states[target],
                    BitSet(self.width, output),
                )

    def _transition(
        self, index: int, value: int, taps: Sequence[Sequence[int]]
    ) -> tuple[int, int]:
        """Output word and next state index for one input word from a state."""
        reg = self.reg_size
        func_mask = (1 << (reg + 1)) - 1
        reg_mask = (1 << reg) - 1
        state_mask = (1 << self.state_size) - 1

        def window(in_bit: int, mask: int) -> int:
            incoming = (value >> in_bit) & 1
            return (((index >> (in_bit * reg)) << 1) | incoming) & mask

        output = 0
        for out_bit in range(self.width):
            parity = sum(
                (window(in_bit, func_mask) & taps[in_bit][out_bit]).bit_count()
                for in_bit in range(self.height)
            )
            if parity & 1:
                output |= 1 << out_bit

        next_state = 0
        for reg_idx in reversed(range(self.height)):
            next_state ^= window(reg_idx, reg_mask)
            next_state = (next_state << (reg_idx * reg)) & state_mask

        return output, next_state

    def code(self, msg: BitSet) -> BitSet:
        """Encode msg, starting from the all-zero state.

        Input words are read from the low end of msg; output word k lands in
        window k of the result.  Bits beyond the last whole input word are
        ignored.
        """
        steps = len(msg) // self.height
        if steps == 0:
            raise ValueError("message is shorter than one input word")
        in_mask = (1 << self.height) - 1
        value = int(msg)

        state = self.states[0]
        codeword = 0
        for step in range(steps):
            word = (value >> (step * self.height)) & in_mask
            state, output = state.next_states[word]
            codeword |= int(output) << (step * self.width)
        return BitSet(steps * self.width, codeword)

    def decode(self, msg: BitSet) -> BitSet:
        """Recover the most likely input sequence by hard-decision Viterbi search."""
        steps = len(msg) // self.width
        if steps == 0:
            raise ValueError("message is shorter than one output word")
        out_mask = (1 << self.width) - 1
        path_mask = (1 << (steps * self.height)) - 1
        value = int(msg)

        metrics = [0] * self.states_num
        next_metrics = [0] * self.states_num
        paths = [0] * self.states_num
        next_paths = [0] * self.states_num

        available = {0}
        for step in range(steps):
            received = (value >> (step * self.width)) & out_mask
            reached: set[int] = set()
            for idx in sorted(available):
                for word, (target, output) in self.states[idx].next_states.items():
                    metric = (int(output) ^ received).bit_count() + metrics[idx]
                    dest = target.index
                    if dest not in reached or metric < next_metrics[dest]:
                        next_metrics[dest] = metric
                        next_paths[dest] = ((paths[idx] << self.height) | word) & path_mask
                        reached.add(dest)
            available = reached
            metrics = list(next_metrics)
            paths = list(next_paths)

        best = min(range(self.states_num), key=metrics.__getitem__)
        result = BitSet(steps * self.height, paths[best])
        result.reverse_bits(self.height)
        return result