# vendomat

A small console vending machine. It is put together from three
interchangeable components:

- a **temperature controller**, which keeps the stock cool and reports
  whether it is healthy (`vendomat.refrigerator.Refrigerator`);
- an **item selector**, which asks the customer what they want
  (`vendomat.console_input.ConsoleInput`);
- a **vendor**, which drives the output that drops the chosen item
  (`vendomat.can_vendor.CanVendor`).

`vendomat.machine.VendingMachine` joins them. Building the machine starts
temperature regulation. Each call to `execute()` checks the hardware
status, lists the available items in alphabetical order, reads one
selection, vends it or reports an invalid entry, then prints five dots a
second apart and clears the screen. It returns `0` when the temperature
controller reports no fault and `-1` otherwise.

The items on offer are fixed in `vendomat.machine.ITEMS`:

| item         | location |
|--------------|----------|
| coke         | 1        |
| diet coke    | 2        |
| dr. pepper   | 3        |
| sprite       | 4        |
| irish coffee | 5        |

## Installation

```
pip install .
```

## Running the machine

```
vendomat
```

The command takes no options besides `--help`. When it starts, the
refrigeration is switched on and the first cycle begins:

```
Starting refrigeration.
Available items:
coke
diet coke
dr. pepper
irish coffee
sprite

Enter item: sprite
Vending item at location 4
.....
```

An unknown name is answered with `Invalid item entered: <name>`. The
screen is cleared with `clear` (or `cls` on Windows) after each cycle.
The machine loops until it is interrupted with Ctrl+C, and then exits
with status 0. If a component cannot be loaded, a message is printed and
the command exits with status -1.

## Using the components in code

The components are ordinary objects that fit the abstract classes in
`vendomat.interfaces` (`TemperatureController`, `ItemSelector`,
`Vendor`), so any of them can be swapped out:

```python
import io

from vendomat.can_vendor import CanVendor
from vendomat.console_input import ConsoleInput
from vendomat.machine import VendingMachine
from vendomat.refrigerator import Pin, Refrigerator

drive, error = Pin(), Pin()
outputs = [False] * 10

machine = VendingMachine(
    Refrigerator(drive, error),
    ConsoleInput(io.StringIO("coke\n"), io.StringIO()),
    CanVendor(outputs),
    output=io.StringIO(),
    pause=lambda seconds: None,
    clear_screen=lambda: None,
)

status = machine.execute()   # 0 when the hardware is okay, -1 otherwise
assert outputs[1] is True    # "coke" lives at location 1
assert drive.value is True   # regulation started when the machine was built
```

- `Pin` is a mutable boolean cell shared between a component and whatever
  stands in for the hardware. `Refrigerator.start_regulating()` and
  `stop_regulating()` print a message and set or clear the drive pin;
  `is_okay()` is true while the error pin is clear.
- `ConsoleInput(stream, output)` writes the prompt `Enter item: ` to
  `output` and reads one line from `stream`, dropping the trailing
  newline. Left out, they default to standard input and output.
- `CanVendor(drive_outputs).vend(location)` prints the location and sets
  that entry of the list; locations outside the list are ignored.

The ready-made component instances used by the command are available from
`vendomat.refrigerator.get_temperature_controller()`,
`vendomat.console_input.get_item_selector()` and
`vendomat.can_vendor.get_vendor()` (a vendor with ten outputs); each
returns the same instance on every call. `vendomat.runner.load_component()`
calls any such factory and raises `vendomat.runner.ComponentLoadError`
if it raises or returns `None`.

## What it does not do

The pins and drive outputs are plain in-memory values: nothing here talks
to real cooling or dispensing hardware. There is no payment, pricing or
stock counting, and the item list cannot be changed without editing
`vendomat.machine.ITEMS`.

## Running the tests

```
pip install .[test]
pytest
```