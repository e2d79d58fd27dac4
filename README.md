# lager

Small building blocks for interactive programs that are built around a single,
unidirectional flow of data.

## What is in the package

- `lager.nodes`: the value graph. `ReaderNode` holds a current and a last
  value, its children (held weakly) and its observers. Changes travel down in
  two phases: `send_down` recomputes and propagates, and `notify` calls the
  observers registered with `connect`. `CursorNode` adds `send_up`.
  `InnerNode` derives from parent nodes, and `RootNode` has no parents. The
  module also has `has_changed`, `current_from` and `link_to_parents`.
- `lager.state`: `State` is a root cursor that holds a value, backed by a
  `StateNode`. With `Tag.TRANSACTIONAL`, the default, a written value is
  visible only after the node is committed with `send_down()` and `notify()`.
  With `Tag.AUTOMATIC`, it is propagated at once. `make_state` and
  `make_state_node` are shortcuts.
- `lager.sensor`: `Sensor` is a read-only root that samples a function each
  time its `SensorNode` is recomputed. `make_sensor` and `make_sensor_node`
  are shortcuts.
- `lager.lens_nodes`: `Lens` is a getter and setter pair. Lenses compose with
  `|`, and a `Lens()` with no functions is the identity. `LensReaderNode` and
  `LensCursorNode` look at their parents through a lens, and the cursor
  variant writes back through it. Use `make_lens_reader_node` and
  `make_lens_cursor_node` to create them linked to their parents.
- `lager.merge_nodes`: `MergeReaderNode` and `MergeCursorNode` combine
  several parents into a tuple. The cursor variant splits a written tuple
  back to the parents. Use `make_merge_reader_node` and
  `make_merge_cursor_node` to create them.
- `lager.writer`: `Writer` is a write-only handle (`set`, `update`) onto a
  cursor node, or onto any object that has one in its `node` attribute, such
  as a `State`.
- `lager.future`: `Promise` and `Future` chain callbacks onto a `post`
  function or onto a loop object that has a `post` method. `Future.then`
  consumes the future. `Future.also` waits for two futures. Calling a promise
  a second time raises `RuntimeError`.
- `lager.enum`: `to_string` and `to_enum` convert `enum.Enum` members to and
  from their names. An unknown value or name raises `ValueError`.
- `lager.serialization`: JSON-ready save and load helpers.
  - `save_array` and `load_array` handle sequences; loading gives a tuple.
  - `save_set` and `load_set` handle sets. Loading duplicates raises
    `ValueError`.
  - `save_variant` and `load_variant` handle values tagged with their type
    name. `Monostate` is the empty alternative.
  - `to_json` and `from_json` convert to and from JSON text.
- `lager.autopong`: the model and pure update function of a small paddle and
  ball game. It has `Model`, `PaddleMoveAction`, `TickAction`, `update`,
  `dot`, `segment_squared_distance` and the game's constants.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Examples

State with automatic propagation:

```python
from lager.state import State, Tag

counter = State(0, Tag.AUTOMATIC)
seen = []
counter.node.connect(seen.append)

counter.set(1)
counter.update(lambda x: x + 1)
assert counter.get() == 2
assert seen == [1, 2]
```

Focusing on part of a state through a lens:

```python
from lager.lens_nodes import Lens, make_lens_cursor_node
from lager.state import State, Tag

point = State({"x": 1, "y": 2}, Tag.AUTOMATIC)
x = make_lens_cursor_node(
    Lens(lambda p: p["x"], lambda p, v: {**p, "x": v}), [point.node]
)
x.send_up(10)
assert point.get() == {"x": 10, "y": 2}
assert x.last == 10
```

Chaining work with futures:

```python
from lager.future import Promise

queue = []
promise, future = Promise.with_post(queue.append)
future.then(lambda: print("done"))
promise()          # runs the chained callback
```

Serializing a variant:

```python
from lager.serialization import Monostate, save_variant, load_variant, to_json, from_json

text = to_json(save_variant(Monostate()))
value = load_variant(from_json(text), [int, Monostate, float])
assert value == Monostate()
```

Stepping the game model:

```python
from lager.autopong import Model, PaddleMoveAction, TickAction, update

model = update(Model(), PaddleMoveAction(delta=20))
model = update(model, TickAction(delta=16))
```

## What it does not do

The package has no store that dispatches actions to a reducer and runs
effects. It has no event loops, and no debugger. The `lager.autopong` module
is only the game's model and update function: it has no window, no drawing
and no input handling. There is no command-line program.

## Running the tests

```
pytest
```