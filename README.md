# algo-drills

Small, self-contained solutions to classic data-structure and sorting
exercises. Each module covers one family of problems and can be used on its
own. The package uses only the Python standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algo_drills.cipher` | `random_key`, `encrypt`, `letter_counts`, `frequency_key`, `decrypt`: letter substitution and a frequency-based guess at the plain text |
| `algo_drills.linked_list` | `Node`, `SinglyLinkedList` with `insert`, `reverse`, `search`, `delete_node`, `head_value`, `tail_value`, `middle_by_size`, `middle_by_scan` |
| `algo_drills.sentence` | `reverse_words`: reverse the order of words, keeping every space |
| `algo_drills.segment_tree` | `SegmentTree` (abstract), `ProductTree` and `products_except_self` |
| `algo_drills.word_pairs` | `strip_non_alpha`, `count_word_pairs`, `format_counts` |
| `algo_drills.minmax_stack` | `MinMaxStack`: a stack of at most 255 items with constant-time `find_min` and `find_max` |
| `algo_drills.differences` | `max_difference`, `max_difference_sorted`, `min_difference_heap`, `min_difference_sorted` |
| `algo_drills.unions` | `union_of_sets`, `union_of_sorted` |
| `algo_drills.counting` | `sort_by_counting`, `find_mode`, `h_index`, `distinct_names` |
| `algo_drills.majority` | `MajorityResult`, `find_majorities_by_voting`, `find_majorities_by_selection`: values occurring more than n/2 and n/4 times |
| `algo_drills.intervals` | `Interval`, `merge_intervals`, `max_overlaps`, `fewest_covers` (raises `NoCoverError`) |
| `algo_drills.heaps` | `k_smallest`, `merge_sorted_lists`, `second_largest`, `third_largest` |
| `algo_drills.selection` | `find_median`, `wiggle_sort_by_swaps`, `wiggle_sort_by_partition`, `is_wiggled` |
| `algo_drills.pair_sums` | `find_pairs_with_sum`, `has_pair_sum`, `has_pair_sum_sorted`, `can_add_up` |
| `algo_drills.partitioning` | `FlagColor`, `Color`, `dutch_flag_sort`, `negatives_first`, `sort_by_color` |
| `algo_drills.reverse_sort` | `sort_by_reversals`, `insertion_sort`, `measure_time` |

Functions that take a sequence return a new list and leave their input
unchanged. Errors are raised as exceptions: for example `MinMaxStack.pop` on
an empty stack raises `IndexError("No item")`, and `second_largest` on fewer
than two values raises `ValueError("Elements shortage")`.

## Examples

```python
from algo_drills.sentence import reverse_words
from algo_drills.segment_tree import products_except_self
from algo_drills.counting import h_index, find_mode
from algo_drills.heaps import k_smallest
from algo_drills.minmax_stack import MinMaxStack

reverse_words("My name is Chris")        # "Chris is name My"
products_except_self([5, 3, 7])          # [21, 35, 15]
h_index([6, 3, 9, 1, 3, 8])              # 3
find_mode([4, 6, 2, 4, 3, 1])            # 4
k_smallest([-3, 2, 12, -1, 10, 5], 3)    # [-3, -1, 2]

stack = MinMaxStack()
for item in (10, 11, 9, -3):
    stack.push(item)
stack.find_min()   # -3
stack.find_max()   # 11
stack.pop()        # -3
stack.find_min()   # 9
```

A linked list:

```python
from algo_drills.linked_list import SinglyLinkedList

items = SinglyLinkedList([1, 2, 3, 4, 5])
items.reverse()
list(items)                   # [5, 4, 3, 2, 1]
items.middle_by_size().item   # 3
```

Intervals:

```python
from algo_drills.intervals import Interval, merge_intervals

merge_intervals([Interval(1, 3), Interval(2, 6), Interval(8, 10), Interval(7, 18)])
# [Interval(left=1, right=6), Interval(left=7, right=18)]
```

Functions that shuffle their input (`find_median`, `wiggle_sort_by_swaps`,
`wiggle_sort_by_partition`, `sort_by_reversals`) and `random_key` take an
optional `random.Random`, so results can be reproduced by passing a seeded one.

## Command-line tools

Two commands are installed with the package.

`algo-cipher` encrypts a text file with a random letter substitution, or
guesses the plain text of an encrypted file by matching its letter
frequencies against English. Output is written line by line.

```
algo-cipher encrypt plain.txt cipher.txt --seed 42
algo-cipher decrypt cipher.txt guessed.txt
```

`--seed` fixes the random key used for encryption. Decryption is a guess:
it is only as good as the text's letter frequencies are typical of English.

`algo-word-pairs` counts how often each pair of adjacent words occurs in a
text and writes one `first second:count` line per pair, most frequent first.
Leading and trailing non-letters are stripped from each word.

```
algo-word-pairs input.txt result.txt
```

Without arguments it reads `./sample-text2.txt` and writes
`./count-result.txt`.

Both commands print `cannot open file` or `cannot operate file` to standard
error and exit with status 1 when the input cannot be read or the output
cannot be written.