# algobasics

Plain implementations of classic beginner algorithms: three quadratic sorts,
a family of binary searches with peak finding, and a randomised checker that
confirms the sorts agree with each other.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Sorting

`algobasics.sorting` provides `bubble_sort`, `insert_sort` and
`selection_sort`. Each one sorts a mutable sequence in place into ascending
order and also returns that same sequence. `format_items` renders values with
a comma after every one.

```python
from algobasics.sorting import bubble_sort, format_items

data = [5, 2, 9, 1, 5, 6]
bubble_sort(data)
print(format_items(data))   # 1,2,5,5,6,9,
```

## Searching

`algobasics.search` works on sorted sequences:

- `binary_search(items, target)` returns the index of `target`. If `target` is
  absent it returns `-(insertion_point + 1)`, which is always negative.
- `find_left(items, target)` returns the leftmost index whose value is
  `>= target`, or `-1` if there is none.
- `find_right(items, target)` returns the rightmost index whose value is
  `<= target`, or `-1` if there is none.
- `find_peak_element(items)` returns the index of one element larger than its
  neighbours, treating positions outside the sequence as lower than any value.
  The sequence need not be sorted. An empty sequence raises `ValueError`.

```python
from algobasics.search import binary_search, find_left, find_right, find_peak_element

items = [1, 3, 5, 7, 9]
binary_search(items, 5)    # 2
binary_search(items, 2)    # -2
find_left([2, 4, 4, 6, 8], 4)    # 1
find_right([2, 4, 4, 6, 8], 4)   # 2
find_peak_element([1, 3, 2])     # 1
```

## Cross-checking the sorts

`algobasics.validator.random_array(size, max_value, rng=None)` returns `size`
integers drawn uniformly from `1..max_value`.

`algobasics.validator.validate(test_times=5000, max_size=100, max_value=1000, rng=None)`
builds `test_times` random arrays, each with a random length in `1..max_size`,
sorts copies of each with all three algorithms and returns the list of input
arrays on which the results disagreed (empty when they all agree). Pass a
`random.Random` as `rng` for reproducible runs.

## Command-line demos

```
algobasics-sort [bubble|insert|select]   # sort a sample array with one algorithm (default: bubble)
algobasics-search                        # run the search routines on fixed sample data
algobasics-validate [--times N] [--max-size N] [--max-value N] [--seed N]
```

`algobasics-sort` prints the sample before and after sorting.
`algobasics-validate` prints `Testing begins`, one `Error!!!` line for every
disagreement found, and `end of test`.