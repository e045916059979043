# drills

A collection of small, self-contained routines: string puzzles, sequence
algorithms, counting problems, hashing helpers, date and schedule helpers,
a few object-oriented exercises, and three tiny in-memory JSON web services
built on Flask.

## Modules

| Module | What it holds |
| --- | --- |
| `drills.stack` | `Stack`: a LIFO stack of strings with `push`, `peek`, `pop`, `is_empty`; `peek` and `pop` raise `IndexError` when empty |
| `drills.text` | `camelcase`, `super_reduced_string`, `minimum_number`, `alternate`, `reverse_only_letters`, `is_palindrome_permutation`, `length_of_longest_substring`, `get_time`, `format_duration` |
| `drills.sequences` | `big_sorting`, `insertion_sort_steps`, `find_duplicates`, `longest_consecutive`, `merge_sorted_arrays`, `reverse_in_place`, `segment` |
| `drills.counting` | `winning_card`, `sock_merchant`, `most_loved_dish`, `most_loved_dish_running`, `get_pins`, `partial_sums`, `count_recipes` |
| `drills.hashing` | `hash_vin` (32-bit FNV-1a as a decimal string), `hash_key_with_salt` and `check_hash_key` (salted scrypt, base64 encoded) |
| `drills.schedule` | `convert_to_24h`, `get_start_time`, `get_end_time`, `is_expired`, `format_valuation_date`, `graphql_timeout`, `TokenExpiredError` |
| `drills.training` | `Calculation` with `add`, `subtract`, `multiply`, `divide`; `string_to_number`, `incremented_return`, `int_min`, `filter_unique`, `filter_by_age_range`, `incrementor`, `multiplier`, `find_containing` |
| `drills.shapes` | `Shape`, `Circle`, `Rectangle`, `Product`, `Book`, `Game`, `apply_store_discount` |
| `drills.events_api` | Events and tasks service |
| `drills.users_api` | Users service |
| `drills.products_api` | Products and inventory service |

## Examples

```python
from drills.text import camelcase, format_duration, super_reduced_string

camelcase("saveChangesInTheEditor")      # 5
format_duration(3662)                    # "1 hour, 1 minute and 2 seconds"
super_reduced_string("abba")             # "Empty String"
```

```python
from drills.sequences import longest_consecutive, merge_sorted_arrays

longest_consecutive([4, 3, 8, 1, 2, 6, 100, 9])   # 4
merge_sorted_arrays([1, 3, 5], [2, 4, 6, 7])      # [1, 2, 3, 4, 5, 6, 7]
```

```python
from drills.stack import Stack

stack = Stack()
stack.push("Apple")
stack.push("Melon")
stack.peek()       # "Melon"
stack.pop()        # "Melon"
stack.is_empty()   # False
```

```python
from drills.hashing import check_hash_key, hash_key_with_salt

stored = hash_key_with_salt("secret")
check_hash_key("secret", stored)   # True
check_hash_key("other", stored)    # False
```

```python
from drills.counting import winning_card

winning_card([[5, 7, 3, 9, 4, 9, 8, 3, 1], [1, 2, 2, 4, 4, 1], [1, 2, 3]])  # 8
winning_card([[5, 5], [2, 2]])                                             # -1
```

```python
from drills.schedule import TokenExpiredError, get_start_time, is_expired

get_start_time("Wednesday 7AM - 7PM")   # 7
# is_expired returns False for a token younger than 24 hours
# and raises TokenExpiredError once that has passed.
```

## Web services

Each service is a Flask application returned by `create_app()` in its
module, so it can be served by any WSGI server or exercised with Flask's
test client. Each can also be started directly; every command takes
`--host` (default `127.0.0.1`) and `--port`:

```
drills-events      # port 8081 by default
drills-users       # port 8000 by default
drills-products    # port 8081 by default
```

Routes:

- `drills.events_api`: `GET /`, `POST /event`, `GET /events`, `GET /tasks`,
  and `GET`, `PUT`, `DELETE` on `/events/<id>`. It starts with one event and
  two tasks.
- `drills.users_api`: `POST /users`, `GET /users`, and `GET`, `PUT`, `DELETE`
  on `/users/<id>`. New users get the id one past the current count.
- `drills.products_api`: `GET /health`, `GET /products`, `GET /inventory`,
  `POST /products`, and `GET`, `PUT`, `DELETE` on `/products/<id>`. It starts
  with one product.

Unknown ids answer with status 404 and a JSON error body.

## What it does not do

The web services keep their data in memory only: nothing is written to disk
or a database, and every call to `create_app()` starts again from the seed
data. There is no authentication, sessions or access control.

## Running the tests

Install the `test` extra and run pytest; the tests live in `tests/`, one
file per module.