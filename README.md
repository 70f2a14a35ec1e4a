# kata

A collection of small, self-contained exercises: classic sorting and
searching algorithms, simple data structures, number puzzles, text tools
and a few tiny command-line and network programs. Each module can be
imported on its own, and each module except `kata.structures` and
`kata.iterdemo` also comes with a command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library

### Sorting

`kata.sorting` holds `bubble_sort`, `insertion_sort`, `selection_sort`,
`bucket_sort`, `counting_sort`, `merge_sort`, `shell_sort`, `heap_sort`
and `quick_sort`. Most of them sort a list in place and return `None`;
`bucket_sort` and `heap_sort` return a new list. `bucket_sort` takes
non-negative integers with a positive maximum, and
`counting_sort(items, maxval)` takes integers in `0..maxval`; both raise
`ValueError` otherwise.

```python
from kata.sorting import bubble_sort, heap_sort, quick_sort

items = [2, 7, 3, 5, 1, 24, 31, 100, 11]
bubble_sort(items, reverse=True)
# items == [100, 31, 24, 11, 7, 5, 3, 2, 1]

items = [2, 7, 3, 5, 1, 24, 31, 100, 7]
quick_sort(items)
# items == [1, 2, 3, 5, 7, 7, 24, 31, 100]

heap_sort([2, 7, 2, 5, 1], reverse=False)
# [1, 2, 2, 5, 7]
```

### Searching

```python
from kata.searching import binary_search, linear_search

linear_search("fox", ["dog", "cat", "fox", "rabbit"])  # 2
binary_search(13, [5, 6, 11, 13, 15])                  # 3
binary_search(5, [1, 2, 3, 4])                         # None
```

### Data structures

`kata.structures` provides `Stack`, `Queue` and a singly linked
`LinkedList` of integers. `pop`, `dequeue` and `peek` return `None` when
the container is empty. Note that `Stack.peek` returns the *bottom*
(first pushed) element. `LinkedList.add` inserts at the head; the list
can be iterated and `str()` joins its values with spaces.

```python
from kata.structures import LinkedList, Queue, Stack

queue = Queue()
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()   # 1

stack = Stack()
stack.push(1)
stack.push(2)
stack.pop()       # 2

chain = LinkedList()
chain.add(10)
chain.add(20)
chain.first()     # 20
chain.find(10)    # 10
```

### Cumulative sums

Ranges are 1-based and inclusive; out-of-range indexes raise `IndexError`.

```python
from kata.cumsum import create_cumulative_sum, range_cumulative_sum

cum = create_cumulative_sum([1, 2, 3, 4, 5])  # [0, 1, 3, 6, 10, 15]
range_cumulative_sum(cum, 2, 4)               # 9  (2 + 3 + 4)
```

### Numbers, ciphers and text

```python
from kata.numbers import fizzbuzz, multiply, prime_factorize
from kata.caesar import encrypt, shift_text
from kata.grep import search

fizzbuzz(15)              # "FizzBuzz"
prime_factorize(100)      # [2, 2, 5, 5]
multiply("10", "2")       # 20; raises ValueError for non-numeric text
encrypt("a", 3)           # "d"
shift_text("abc", 1)      # "bcd"
search("duct", "Rust:\nsafe, fast, productive.\nPick there.")
# ["safe, fast, productive."]
```

### Reverse Polish notation

```python
from kata.rpn import RpnCalculator, RpnError

calc = RpnCalculator()
calc.evaluate("2 3 +")    # 5
calc.evaluate("2 3 /")    # 0 (division truncates toward zero)
```

Malformed formulas, division by zero and results outside the 32-bit
integer range raise `RpnError`.

### Other modules

- `kata.janken`: rock-paper-scissors against the computer (`judge_winner`,
  `parse_hand`, `play_round`, `GameResult`).
- `kata.monthcal`: `generate_calendar(year, month)` returns a
  `CalendarMonth`; `format_calendar` renders it as text.
- `kata.frequency`: character frequency analysis of a text file
  (`get_text`, `frequency_analysis`, `sort_counts`, `format_result`).
- `kata.iterdemo`: small iterator helpers (`iter_zip`, `iter_map`,
  `iter_filter`, `iter_fold`, `iter_collect`, `iter_enumerate`).
- `kata.asyncdemo`: the coroutines `async_add` and `sum_of_sums`.
- `kata.readme`: `write_readme(directory)` writes a `readme.md` template.
- `kata.numberfile`: `get_int_from_file(path)` returns twice the integer
  stored in a file, raising `NumberFileError` on failure.
- `kata.stocks`: `read_csv`, `filter_by_ratio`, `filter_by_year_month`
  and `format_records` for index-change records (`Record`).
- `kata.webserver`: `handle_request` builds a raw response, `serve`
  creates a threaded TCP server.
- `kata.hello_routes`: `respond(method, path)` and `make_server`.
- `kata.forecast`: `fetch_forecast` asks the Open-Meteo API for Tokyo's
  daily forecast; `parse_forecast` and `format_forecast` handle the result.
- `kata.checkerboard`: `make_checkerboard(size, frame)` returns a Pillow
  image.
- `kata.listing`: `list_root()` runs `ls -l -a` in `/` and returns the
  output.

## Commands

| Command              | What it does                                                      |
|----------------------|-------------------------------------------------------------------|
| `kata-sort`          | quick-sorts a sample list and prints it                           |
| `kata-search`        | searches a list (sample or given) and prints the index; `--linear`|
| `kata-cumsum`        | times plain range sums against cumulative sums                    |
| `kata-numbers`       | `fizzbuzz` (default), `factor N`, `largest [N ...]`, `multiply`   |
| `kata-caesar`        | prints every Caesar shift (1–25) of a sample ciphertext           |
| `kata-janken`        | plays rock-paper-scissors until a round is not a draw             |
| `kata-calendar`      | prints a month's calendar (default: current month in Tokyo)       |
| `kata-freq`          | character frequency analysis of a file                            |
| `kata-grep`          | prints the lines of a file that contain a query                   |
| `kata-async`         | runs the coroutine demo and prints 21                             |
| `kata-mkreadme`      | writes a `readme.md` template into a directory                    |
| `kata-rpn`           | evaluates RPN formulas from a file or standard input; `-v`        |
| `kata-numberfile`    | reads `number.txt` (or a given file) and prints twice its value   |
| `kata-stocks`        | prints records from a CSV file; `--year`, `--month`, `--over`, `--under` |
| `kata-webserver`     | serves `hello.html` and `404.html` on port 7878                   |
| `kata-hello`         | a two-route hello-world server on port 7878                       |
| `kata-forecast`      | fetches and prints the daily forecast                             |
| `kata-checkerboard`  | writes a checkerboard image to `image.png`                        |
| `kata-ls`            | runs `ls -l -a` in the root directory                             |

For example:

```
kata-grep frog poem.txt
echo "2 3 +" | kata-rpn
kata-rpn --verbose formulas.txt
kata-numbers factor 100
kata-calendar 2023 5
```

## What is not included

- No HTML pages are shipped: `kata-webserver` reads `hello.html` and
  `404.html` from the directory given with `--html-dir` (default `html`),
  which you must provide.
- No stock data is shipped: `kata-stocks` needs a CSV file whose first
  row is a header and whose first three columns are the date
  (`YY/MM/...`), the change and the change in percent.
- `kata-forecast` needs network access; there is no offline data.
- `kata-ls` needs an `ls` program on the system.