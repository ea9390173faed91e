# convsim

This package encodes messages with convolutional codes and decodes them with
hard-decision Viterbi decoding. It also simulates a binary symmetric channel and
runs a small bit-error-rate experiment. It uses only the standard library.

## Modules

- `convsim.bitset` provides `BitSet` and `Base`.
  - `BitSet` is a mutable bit string of fixed width. Bit 0 is the least significant bit.
  - `Base` selects how `BitSet.from_string` reads its text: `Base.BIN` or `Base.HEX`.
- `convsim.trellis` provides `Trellis` and `State`.
  - `Trellis` builds the states of a feed-forward convolutional encoder from a
    generator matrix.
  - `Trellis.code` encodes a message, starting from the all-zero state.
  - `Trellis.decode` searches for the most likely input sequence with the Viterbi
    algorithm, using the Hamming distance as the metric.
- `convsim.channel` provides `Channel`. It flips each bit of a message independently
  with probability `prob`.
- `convsim.file_tools` has these helpers:
  - `get_files` lists the file names in a folder that have a given suffix.
  - `check_for_directories` creates missing folders.
  - `check_for_file` creates an empty file if nothing exists at the path.
  - `write_vector_file` writes a list of values to a file.
- `convsim.simulation` provides the built-in generator matrices and the experiment:
  - `MatrixSize` names the matrix shapes: `ONE_BY_TWO`, `ONE_BY_THREE`,
    `TWO_BY_THREE`, `THREE_BY_FIVE`, `ONE_BY_FIVE`.
  - `generator_matrix` returns a copy of the matrix for a given shape.
  - `berr_check_model` runs the experiment.
  - `main` is the command-line entry point.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Bit sets

```python
from convsim.bitset import Base, BitSet

a = BitSet(8, 0b1011)                   # width 8, value 11
b = BitSet.from_string("1101", Base.BIN)  # the first character is bit 0, so the value is 11
print(a.to_string())                    # 8'b11010000
print(int(b), len(b), b.count())        # 11 4 3
print(a == b)                           # True
```

- A value is cut to the width of the set when it is loaded.
- Equality, ordering and hashing depend only on the numeric value, so sets of
  different widths that hold the same value compare equal.
- Shifts work in place (`<<=`, `>>=`), and so do `^=` and `&=`. `^` returns a new set.
- `reverse_bits(n)` reverses the order of consecutive windows of `n` bits. It clears
  the bits above the last whole window.
- In hex, each upper-case digit fills four bits, written most significant bit first.
  Any other character gives four clear bits.

## Encoding and decoding

A generator matrix has one row for each input bit and one entry for each output bit.
Each entry is a tap polynomial of `reg_size + 1` bits. You can give it as a `BitSet`
or as an integer. Bit 0 taps the incoming bit, and the higher bits tap that input's
shift register.

```python
import random

from convsim.bitset import Base, BitSet
from convsim.channel import Channel
from convsim.trellis import Trellis

trellis = Trellis(3, [[11, 15]])        # rate 1/2, three-bit register

msg = BitSet.from_string("01010001001110110110", Base.BIN)
codeword = trellis.code(msg)
print(codeword.to_string())
print(trellis.decode(codeword).to_string())

channel = Channel(0.1, random.Random(10))
noisy = channel.add_noise(codeword)
print((trellis.decode(noisy) ^ msg).count(), "bit errors after decoding")
```

- `code` reads input words of `height` bits from the low end of the message. Output
  word `k` is placed in window `k` of the result.
- Bits after the last whole input word are ignored.
- `code` raises `ValueError` for a message shorter than one input word. `decode`
  raises `ValueError` for a message shorter than one output word.
- `Channel` takes an optional `random.Random`, which makes runs repeatable.
- You can change the flip probability through the `prob` attribute.

## Bit-error-rate experiments

`berr_check_model(iterations, thr, duration, m_size, msg_size, guard=False, rng=None)`
runs the experiment:

1. It encodes random messages of `msg_size` bits with the matrix named by `m_size`.
2. It passes them through the channel and decodes them.
3. It repeats this for channel probabilities 0, `duration`, `2*duration`, … while the
   probability is at most `thr`.

It returns two lists: the mean bit error rate at each probability, and the
probabilities themselves. When `guard` is true, zero bits are appended to each message
to flush the encoder registers.

```python
import random

from convsim.simulation import MatrixSize, berr_check_model

berr, probs = berr_check_model(
    100, 0.5, 0.05, MatrixSize.ONE_BY_FIVE, 20, True, random.Random(10)
)
for p, e in zip(probs, berr):
    print(f"{p:.2f}  {e:.4f}")
```

## Command line

```
convsim
```

You can also run `python -m convsim.simulation`.

By default the command runs the experiment with these settings:

| Setting | Default |
| --- | --- |
| Code | rate 1/5 (`ONE_BY_FIVE`) |
| Message length | 20 bits |
| Iterations per point | 1000 |
| Probabilities | 0 up to 1.01, in steps of 0.01 |
| Guard bits | on |
| Seed | 10 |

It creates the output folders if they are missing and writes
`data/one_by_five/berr.txt` and `data/one_by_five/duration.txt`. Each file holds:

1. the number of values,
2. a blank line,
3. one value per line.

Options:

- `--data-dir` (default `data`)
- `--folder` (default `one_by_five`)
- `--matrix` (one of the `MatrixSize` names)
- `--iterations`
- `--threshold`
- `--step`
- `--msg-size`
- `--no-guard`
- `--seed`

## What it does not do

- The decoder uses hard decisions only. It accepts no soft or likelihood inputs.
- Results are written as plain text files. There is no plotting.