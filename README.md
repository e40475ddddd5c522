# labkit

A handful of small command-line tools and the Python functions behind them.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Commands

Each command returns exit status 0 on success and 1 on bad arguments or a
failure.

### labkit-wc

Counts the lines, bytes or whitespace-separated words in a file.

```
labkit-wc -l notes.txt      # or --lines
labkit-wc -c notes.txt      # or --bytes
labkit-wc -w notes.txt      # or --words
labkit-wc -a notes.txt      # or --all: lines, bytes and words
```

Output looks like `12 lines`, `340 bytes`, `57 words`. Anything else on the
command line prints `invalid arguments`.

From Python, in `labkit.wordcount`:

- `count_lines(path)` counts lines, but reads them in chunks of
  `LINE_CHUNK` (49) bytes, so a line longer than that counts once per chunk.
- `count_bytes(path)` returns the file size.
- `count_words(path)` counts whitespace-separated words.

### labkit-arc

A simple archive format that stores files one after another, each with its
name and size.

```
labkit-arc --file bundle.arc --create a.txt b.bin c.png
labkit-arc --file bundle.arc --list
labkit-arc --file bundle.arc --extract
```

An archive starts with the 8-byte signature `arcfile\0` and a 32-bit entry
count; each entry has a 16-byte header (name size including its NUL, padding,
64-bit data size), the NUL-terminated name and the data, all little-endian.

When you create an archive, its name must not be the same as any of the
files going into it. Names are stored as given. If anything fails, the partly
written archive is removed. `--list` prints the stored names in order;
`--extract` writes each file back under its stored name, printing
`creating file NAME` as it goes. Files extracted before an error stay in
place.

From Python, in `labkit.archive`: `create_archive(archive_path, file_names)`,
`extract_archive(archive_path)` (returns the names written) and
`list_archive(archive_path)` (returns the stored names). Failures raise
`ArchiveError`.

### labkit-uint1024

Unsigned integers of a fixed width of 35 base-10⁹ limbs, up to 315 decimal
digits. Addition and multiplication wrap modulo 10³¹⁵; subtraction gives 0
when the left operand is not strictly greater.

The command prompts for `n`, `x` and `y` on standard input, then prints
`from_uint(n)`, `x + y`, `x - y` and `x * y`. `n` must be a 32-bit unsigned
integer; `x` and `y` may have at most 309 digits.

```python
from labkit.uint1024 import UInt1024

x = UInt1024.parse("123456789012345678901234567890")
y = UInt1024.from_uint(42)
print(x + y, x - y, x * y)
x.compare(y)   # 1 if x > y, -1 if x < y, 0 if they are equal
x.limbs        # the 35 limbs, least significant first
```

`UInt1024` values are frozen and ordered; invalid input raises `ValueError`
or `TypeError`.

### labkit-life

Runs a life cellular automaton on a 1-bit BMP image. A pixel whose bit is 0
is a live cell, a set bit is a dead one, and the field wraps around at its
edges. The rule: a dead cell with exactly three live neighbours is born, a
live cell with exactly two live neighbours survives, and every other cell is
dead in the next generation (so, unlike the classic rule, a live cell with
three neighbours dies).

```
labkit-life --input glider.bmp --output frames --max_iter 100 --dump_freq 5
```

Every `dump_freq`-th generation (default 1) is written into the output
directory as `<generation>.bmp`, with the input's headers. The directory must
already exist. A `max_iter` of 0 (the default) runs without limit; the run
stops early, printing `life is freezed`, once a generation equals the one
before it.

From Python, in `labkit.life`:

- `LifeBitmap.load(path)` reads the image; its `cells` are rows of booleans.
- `LifeBitmap.encode(cells)` and `LifeBitmap.save(path, cells)` produce the
  file for other cells of the same shape.
- `LifeBitmap.render(cells)` draws `8` for live and `.` for dead cells.
- `next_generation(cells)` applies the rule once.
- `run(input_path, output_dir, max_iter, dump_freq)` does what the command
  does and returns the paths written.

Bad images raise `BitmapError`.

## Running the tests

```
pip install .[test]
pytest
```