# danobj

A small dynamic object model of the kind an interpreter uses for its values.
It comes in three parts:

- `danobj.objects`: plain values (integers, floats, strings, three-component
  vectors and fixed-size arrays) with a generic `+` and `len()`.
- `danobj.refcount`: the same kinds of value with explicit reference counting.
  Containers take a reference to what they hold. Releasing an object releases
  what it holds in turn.
- `danobj.stack` and `danobj.vm`: a LIFO stack and a tiny virtual machine. The
  machine keeps frames, tracks objects and marks every object it can reach from
  its frames.

## Installation

```
pip install .
```

## Plain objects

```python
from danobj.objects import Integer, Float, String, Vector, Array, Kind, add, length

total = Integer(5) + Integer(7)          # Integer(value=12)
mixed = Integer(1) + Float(2.5)          # Float(value=3.5)
greeting = String("Hello, ") + String("world!")

v = Vector(Integer(1), Integer(2), Integer(3)) + Vector(Integer(4), Integer(5), Integer(6))
# element-wise: x=5, y=7, z=9

arr = Array(2)                           # two empty slots (None)
arr[0] = Integer(1)
arr[1] = Integer(2)
joined = arr + arr                       # a new Array of size 4
length(joined)                           # 4
total.kind is Kind.INTEGER               # True
```

Values behave as follows:

- `Integer` values wrap to the signed 32-bit range.
- `Float` values are rounded to single precision.
- `len()` and `length()` give 1 for numbers, the character count for strings,
  3 for vectors and the size for arrays.
- `Integer`, `Float`, `String` and `Vector` are immutable. `Array` has a fixed
  size, and its slots can be read, set and iterated.

`add(a, b)` raises `TypeError` when the kinds do not combine, for example a
string and an integer. The `+` operator raises `TypeError` in the same cases.
Indexing an array outside its size raises `IndexError`. Storing anything but an
object in an array raises `TypeError`.

## Reference counting

```python
from danobj.refcount import RcInteger, RcArray, ReleasedObjectError

item = RcInteger(10)        # refcount 1
arr = RcArray(3)
arr[0] = item               # the array takes a reference: refcount 2
item.decref()               # refcount 1, still owned by the array
arr.decref()                # the array is released and drops its item
item.released               # True
```

`RcInteger`, `RcFloat`, `RcString`, `RcVector` and `RcArray` each start with
one reference. The reference-counting methods work as follows:

- `incref()` takes another reference and returns the object.
- `decref()` drops a reference. It returns `True` if that call released the
  object.
- `release()` releases the object at once, whatever its count.

An `RcVector` takes a reference to each of its components. An `RcArray` takes a
reference to each stored value and drops the one it replaces. `+` and
`danobj.refcount.add` build a new object with a reference count of 1. Using an
object after it has been released raises `ReleasedObjectError`.

## Stack

```python
from danobj.stack import Stack

s = Stack()
s.push(1)
s.push(2)
s.peek()        # 2
s.pop()         # 2
len(s)          # 1
s.is_empty()    # False
s.clear()
```

`pop()` and `peek()` raise `IndexError` on an empty stack. Iteration runs from
the bottom of the stack to the top.

## Virtual machine

```python
from danobj.objects import Integer, Vector
from danobj.vm import VirtualMachine

vm = VirtualMachine()
frame = vm.new_frame()      # created and pushed onto the frame stack
x = Integer(1)
vec = Vector(x, Integer(2), Integer(3))
vm.track(vec)
frame.reference(vec)
reached = vm.mark()         # vec and its components, in discovery order
vm.is_marked(x)             # True
```

`push_frame()` pushes an existing `Frame`. `pop_frame()` removes the top frame
and raises `IndexError` if there is none.

## What it does not do

The machine marks reachable objects but has no sweep step. Tracked objects
that are not marked stay in `vm.objects` until you remove them yourself.
There is no parser, bytecode or command-line program. The package provides
only the value model and the building blocks above.

## Running the tests

```
pip install .[test]
pytest
```