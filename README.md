# rustlings

Building blocks for a course of small programming exercises: coloured
status lines and spinners for the terminal, a generator for the
`rust-project.json` file that lets rust-analyzer understand a folder of
exercise files, and a set of worked answers to the course's exercises.

## Installing

```
pip install .
```

The only runtime dependency is `rich`. For the tests:

```
pip install ".[test]"
pytest
```

## Terminal output: `rustlings.ui`

- `warn(message)` prints a red line prefixed with a warning sign.
- `success(message)` prints a green line prefixed with a check mark.
- `bold(text)` returns the text as a bold `rich.text.Text`.
- `spinner(message)` returns a context manager that shows a spinner while
  a step runs; call `update(message)` on it to change the text.
- `no_emoji()` is true when the `NO_EMOJI` environment variable is set; the
  warning and success prefixes then become plain `!` and `✓`.

```python
from rustlings.ui import spinner, success

with spinner("Compiling...") as status:
    status.update("Running...")
success("Successfully ran the exercise")
```

## Editor support: `rustlings.project`

`RustAnalyzerProject` collects one `Crate` per exercise file and writes them
out as `rust-project.json`:

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()            # runs `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

- `get_sysroot_src()` asks `rustc` for the toolchain, prints it and sets
  `sysroot_src` to its `lib/rustlib/src/rust/library` directory.
- `exercises_to_json(root)` walks every path below `root` and passes each to
  `add_path`.
- `add_path(path)` adds a crate when the text after the first dot in the
  path is exactly `rs` (so use a root such as `exercises`, not
  `./exercises`). Each crate uses edition `2021`, no dependencies and the
  `test` cfg, so that rust-analyzer also works inside test blocks.
- `to_dict()` returns the JSON structure; `write_to_disk(path)` writes it
  compactly, by default to `./rust-project.json`.

## Worked answers: `rustlings.lessons`

Each module holds finished versions of a group of exercises:

- `quizzes`: apple pricing, a string `transformer` driven by `Command`
  values, and a `ReportCard` with numeric or letter grades.
- `basics`: `is_even`, `sale_price`, `bigger`, `foo_if_fizz`, a generic
  `Wrapper`, and list doubling with `vec_loop` and `vec_map`.
- `strings`: `trim_me`, `compose_me`, `replace_me`.
- `options`: `maybe_icecream`, which returns `None` for an hour past 24.
- `enums`: message classes (`ChangeColor`, `Echo`, `Move`, `Quit`) and a
  `State` that `process`es them.
- `errors`: `generate_nametag_text`, `total_cost`, and
  `PositiveNonzeroInteger` with `parse_pos_nonzero`, raising
  `CreationError` and `ParsePosNonzeroError`.
- `hashmaps`: fruit baskets and `build_scores_table` for lines of the form
  `team_1,team_2,goals_1,goals_2`.
- `structs`: classic, tuple and unit-like structures, an `Order` template
  and a `Package` with fees.
- `people`: `Person.parse`, raising `ParsePersonError`, and
  `Person.from_str_or_default`, falling back to John, aged 30.
- `traits`: `append_bar` for strings and lists, licensing information and
  combined capabilities.
- `concurrency`: per-offset sums on threads, joining threads, a locked job
  counter and two senders on a queue.
- `iterators`: capitalising words, checked `divide` with `DivisionError`,
  `factorial`, and counting `Progress` values.

```python
from rustlings.lessons.people import Person

Person.parse("Mark,20")                  # Person(name='Mark', age=20)
Person.from_str_or_default("Mark,")      # Person(name='John', age=30)
```

## What this package does not do

There is no command-line tool. The package does not read a course file,
compile, run, test or lint exercises, detect the `I AM NOT DONE` marker,
track progress, or watch files for changes; it provides only the terminal
helpers, the project-file generator and the worked answers described above.