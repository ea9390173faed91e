"""Bit-error-rate simulation of convolutional codes over a noisy channel."""

from __future__ import annotations

import argparse
import enum
import os
import random

from .bitset import Base, BitSet
from .channel import Channel
from .file_tools import check_for_directories, check_for_file, write_vector_file
from .trellis import Trellis

REG_SIZE = 3

# Tap polynomials, bit 0 tapping the incoming bit.
_POLY13 = 13
_POLY11 = 11
_POLY15 = 15


class MatrixSize(enum.Enum):
    """Shapes of the built-in generator matrices (inputs by outputs)."""

    ONE_BY_TWO = "1x2"
    ONE_BY_THREE = "1x3"
    TWO_BY_THREE = "2x3"
    THREE_BY_FIVE = "3x5"
    ONE_BY_FIVE = "1x5"


_MATRICES: dict[MatrixSize, list[list[int]]] = {
    MatrixSize.ONE_BY_TWO: [[_POLY11, _POLY15]],
    MatrixSize.ONE_BY_THREE: [[_POLY13, _POLY11, _POLY15]],
    MatrixSize.TWO_BY_THREE: [
        [_POLY13, _POLY11, _POLY15],
        [_POLY11, _POLY13, _POLY15],
    ],
    MatrixSize.THREE_BY_FIVE: [
        [_POLY15, _POLY13, _POLY13, _POLY11, _POLY15],
        [_POLY13, _POLY11, _POLY15, _POLY13, _POLY11],
        [_POLY11, _POLY13, _POLY11, _POLY15, _POLY13],
    ],
    MatrixSize.ONE_BY_FIVE: [[_POLY11, _POLY15, _POLY13, _POLY15, _POLY11]],
}


def generator_matrix(size: MatrixSize) -> list[list[BitSet]]:
    """A fresh copy of the built-in generator matrix of the given shape."""
    return [[BitSet(REG_SIZE + 1, poly) for poly in row] for row in _MATRICES[size]]


def berr_check_model(
    iterations: int,
    thr: float,
    duration: float,
    m_size: MatrixSize,
    msg_size: int,
    guard: bool = False,
    rng: random.Random | None = None,
) -> tuple[list[float], list[float]]:
    """Average bit error rate for channel error probabilities 0, duration, ... up to thr.

    Returns the error rates and the probabilities they were measured at.
    With guard set, zero bits are appended to every message to flush the
    encoder registers.
    """
    if iterations <= 0:
        raise ValueError("iterations must be positive")
    if duration <= 0:
        raise ValueError("duration must be positive")
    if msg_size <= 0:
        raise ValueError("message size must be positive")
    rng = rng if rng is not None else random.Random()

    matrix = generator_matrix(m_size)
    trellis = Trellis(REG_SIZE, matrix)
    channel = Channel(0.0, rng)

    height = len(matrix)
    guard_len = height * REG_SIZE + (msg_size + REG_SIZE) % height if guard else 0

    berr_vec: list[float] = []
    points: list[float] = []

    prob = 0.0
    while prob <= thr:
        channel.prob = prob
        berr = 0.0
        for _ in range(iterations):
            symbols = "".join("1" if rng.random() >= 0.5 else "0" for _ in range(msg_size))
            msg_bits = BitSet.from_string(symbols + "0" * guard_len, Base.BIN)
            codeword = trellis.code(msg_bits)
            noisy = channel.add_noise(codeword)
            decoded = trellis.decode(noisy)
            berr += (decoded ^ msg_bits).count() / msg_size
        berr_vec.append(berr / iterations)
        points.append(prob)
        prob += duration

    return berr_vec, points


def main(argv: list[str] | None = None) -> int:
    """Run the simulation and write the error rates and probabilities to files."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--data-dir", default="data")
    parser.add_argument("--folder", default="one_by_five")
    parser.add_argument(
        "--matrix",
        choices=[size.name for size in MatrixSize],
        default=MatrixSize.ONE_BY_FIVE.name,
    )
    parser.add_argument("--iterations", type=int, default=1000)
    parser.add_argument("--threshold", type=float, default=1.01)
    parser.add_argument("--step", type=float, default=0.01)
    parser.add_argument("--msg-size", type=int, default=20)
    parser.add_argument("--no-guard", action="store_true")
    parser.add_argument("--seed", type=int, default=10)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    berr, points = berr_check_model(
        args.iterations,
        args.threshold,
        args.step,
        MatrixSize[args.matrix],
        args.msg_size,
        not args.no_guard,
        rng,
    )

    folder = f"/{args.folder}"
    check_for_directories(args.data_dir, ["", folder])
    target = os.fspath(args.data_dir) + folder
    berr_path = f"{target}/berr.txt"
    dur_path = f"{target}/duration.txt"

    check_for_file(berr_path)
    check_for_file(dur_path)

    write_vector_file(berr_path, berr)
    write_vector_file(dur_path, points)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())