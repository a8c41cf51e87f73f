# l2utils

A collection of small command-line utilities, text-processing helpers and
compact design-pattern examples.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### l2-sort

Sorts the lines of a text file and prints them.

```
l2-sort [-k N] [-n] [-r] [-u] FILE
```

* `-k`, `--key` – column (space separated, counted from 1) to sort by; a
  value below 1 means the first column
* `-n`, `--numeric-sort` – when both columns read as integers, compare them
  by value; otherwise they compare as text
* `-r`, `--reverse` – reverse the result
* `-u`, `--unique` – drop repeated lines

A line that lacks the requested column is an error: the message goes to
standard error and the exit status is 1.

### l2-grep

Prints the lines that contain a pattern (plain substring, not a regular
expression), read from files or standard input.

```
l2-grep [OPTIONS] PATTERN [FILE...]
```

* `-A N` / `-B N` / `-C N` – print N lines after / before / around each match
* `-c` – print only the number of selected lines
* `-i` – ignore case
* `-v` – print the lines that do not match
* `-F` – a line is selected only if it equals the pattern exactly
* `-n` – prefix each line with its number and a colon

Only complete lines are read: a last line without a newline is ignored.

### l2-cut

Reads standard input, splits every line on a delimiter and prints one field.

```
l2-cut [-f N] [-d DELIM] [-s]
```

* `-f`, `--fields` – field to print, counted from 0 (default 0)
* `-d`, `--delimiter` – delimiter (default TAB); with a space, runs of
  whitespace count as one delimiter
* `-s`, `--separated` – print an empty line for lines without the delimiter

A missing field prints an empty line. A last input line without a newline is
not read.

### l2-wget

Downloads a site: pages, stylesheets and scripts reachable from the given
address on the same host (or its `www.` form) are saved under a directory
named after the host. Pages without an extension are written as
`index.html`. Several addresses are downloaded in parallel.

```
l2-wget URL...
```

### l2-telnet

A minimal TCP client: standard input goes to the socket, whatever the server
sends is printed. Ctrl+D closes the connection; the program also exits, with
status 1, when the server closes it.

```
l2-telnet [--timeout SECONDS] HOST PORT
```

The connection timeout defaults to 10 seconds; 0 waits without limit.

### l2-shell

A shell with the built-in commands `cd`, `pwd`, `echo`, `kill`, `ps`, `exec`,
`fork` and `exit`. `cd` with no argument prints the current directory; `exec`
runs another program and shows its output.

```
l2-shell              # interactive
l2-shell echo hello   # run one command and exit
```

### l2-calendar

An HTTP calendar server, listening on port 8080 by default.

```
l2-calendar [--host HOST] [--port PORT]
```

POST requests take the event as a JSON object in the body
(`event_id`, `user_id`, `name`, `description`, `date`); GET requests take
`user_id` and `date` in the query string.

| Method | Path                | Purpose                              |
|--------|---------------------|--------------------------------------|
| POST   | `/create_event`     | add an event                         |
| POST   | `/update_event`     | replace an event                     |
| POST   | `/delete_event`     | remove an event                      |
| GET    | `/events_for_day`   | events of `user_id` on `date`        |
| GET    | `/events_for_week`  | events in the ISO week of `date`     |
| GET    | `/events_for_month` | events in the month of `date`        |

Dates are written as `YYYY-MM-DD`. A successful call returns
`{"result": ..., "events": [...]}`; a failure returns `{"error": ...}` with
status 400 for bad input and 503 for business-logic errors (400 for the
monthly listing). Unknown paths give 404. Each request is logged.

The routing can be used without HTTP through `l2utils.server.CalendarServer`,
whose `handle(method, path, query, body)` returns a status and a payload; the
store itself is `l2utils.events.EventStore`.

### l2-ntptime

Prints the current time corrected by the offset reported by an NTP server
(`0.beevik-ntp.pool.ntp.org` unless another is given). Errors are written to
standard error and the exit status is 1.

```
l2-ntptime [SERVER]
```

### l2-or

Merges four signals that fire after 1, 5, 7 and 9 seconds into one, waits for
it and prints how long that took. The merged signal (`l2utils.orchannel.merge`)
fires once every one of its inputs has fired.

```
l2-or
```

### l2-visitor

Runs the visitor pattern example.

```
l2-visitor
```

## Library use

```python
from l2utils.unpack import unpack
from l2utils.anagrams import find_anagrams
from l2utils.sorter import sort_lines
from l2utils.grep import grep, GrepOptions
from l2utils.cut import cut

unpack("a4bc2d5e")            # "aaaabccddddde"
unpack("qwe\\45")             # "qwe44444"

find_anagrams(["пятак", "листок", "тяпка", "пятка", "слиток", "столик"])
# {"пятак": ["пятак", "пятка", "тяпка"], "листок": ["листок", "слиток", "столик"]}

sort_lines(["5", "1", "2", "3", "4"], 0, True, False, False)
# ["1", "2", "3", "4", "5"]

grep(["one\n", "two\n"], "tw", GrepOptions(line_num=True))  # "2:two\n"

cut("a\tb\tc", "\t", 1, False)  # "b"
```

`unpack` raises `UnpackError` for an input that is a whole number, such as
`"45"`, and for a repeat count of zero.

## Pattern examples

The package also contains short, self-contained examples of classic design
patterns:

* `l2utils.facade` – `MailFacade.send()` hides SMTP configuration and login
* `l2utils.builder` – `SelectBuilder` builds a `Query` step by step
* `l2utils.visitor` – `Describer` visits `Client` and `Employee`
* `l2utils.command` – `Executor` runs `MakeDirectory`, `Touch` and
  `ShowHistory`, keeping a history; `run_command(base)` works under `base`
* `l2utils.chain` – `ExistValidator` → `ContentValidator` → `YamlValidator`
  fill a `Profile` from `chain.yaml`; `run_chain(base_dir)` runs them
* `l2utils.factory` – `Memory.keeper()` returns a `CacheKeeper` or a
  `FileKeeper` (which keeps `user.yaml` in its directory, `../L2` by default)
* `l2utils.strategy` – `Selector` sorts with `QuickSort` or `BubbleSort`
* `l2utils.state` – an `Order` moving through `Delivery`, `Ready` and `Canceled`

## What it does not do

* The calendar server keeps events in memory only; they are lost when it stops,
  and it reads no configuration file.
* `MailFacade.send()` needs a reachable SMTP server and real credentials; the
  sample in `run_facade()` uses made-up ones and so reports a failure.