# patternbook

A collection of small, self-contained Python examples of the classic design
patterns. Every pattern lives in its own module, can be imported and used
directly, and most modules have a `demo()` function that prints a short
walk-through of the pattern in action.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

Behavioural patterns

- `patternbook.chain_of_responsibility` – a hospital chain: `Reception`, `Doctor`, `Medical`, `Cashier` handling a `Patient`
- `patternbook.command` – `CopyCommand`, `CutCommand` and `PasteCommand` acting on an `AppContext`, with an undo history (`run_command`, `undo_last`)
- `patternbook.iterator` – `UserCollection` and its `UserIterator`
- `patternbook.mediator` – a `TrainStation` coordinating `PassengerTrain` and `FreightTrain` on a single platform
- `patternbook.memento` – `Originator` snapshots, both as `OriginatorBackup` objects (`demo()`) and as JSON (`demo_json()`)
- `patternbook.state` – a music `Player` driven by `StoppedState`, `PlayingState` and `PausedState`; `PlayerApplication.press()` takes `"Play"`, `"Stop"`, `"Prev"` or `"Next"` and returns the status text
- `patternbook.strategy` – a `Navigator` with interchangeable route strategies, as classes, plain functions or lambdas
- `patternbook.template_method` – `TemplateMethod` with `ConcreteClass1` and `ConcreteClass2`
- `patternbook.visitor` – `StringDeserializer` and `VecDeserializer` handing integers to a `Visitor`; an unsupported input form raises `DeserializeError`

Creational patterns

- `patternbook.abstract_factory` – `MacFactory` and `WindowsFactory` producing buttons and checkboxes; `demo(windows=True)`
- `patternbook.builder` – `CarBuilder`, `CarManualBuilder` and the `construct_sports_car`, `construct_city_car`, `construct_suv` recipes; a missing part raises `BuildError`
- `patternbook.maze_game` and `patternbook.render_dialog` – factory methods
- `patternbook.prototype` – cloning a `Circle`
- `patternbook.simple_factory` – `create_button`
- `patternbook.singleton` – a process-wide, lock-protected call counter (`do_a_call`, `call_count`) and explicit state passing (`change`)
- `patternbook.static_creation` – `User.load`, which raises `LookupError` for an unknown id

Structural patterns

- `patternbook.adapter` – `TargetAdapter` around `SpecificTarget`
- `patternbook.bridge` – `BasicRemote` and `AdvancedRemote` over `Tv` and `Radio`
- `patternbook.composite` – `File` and `Folder` search
- `patternbook.decorator` – buffered reading with `read_buffered`
- `patternbook.facade` – `WalletFacade` in front of account, security code, wallet, notification and ledger; refused operations raise `WalletError`
- `patternbook.flyweight` – a `Forest` sharing `TreeKind` instances, drawn on a `Canvas` and saved as SVG; `demo(path)` writes to `res/forest.svg` by default, so the directory must exist
- `patternbook.proxy` – an `NginxServer` rate-limiting requests to an `Application`

## Examples

Passing a patient along a chain of departments:

```python
from patternbook.chain_of_responsibility import Cashier, Doctor, Medical, Patient, Reception

reception = Reception(Doctor(Medical(Cashier())))
patient = Patient(name="John")
reception.execute(patient)

assert patient.registration_done and patient.payment_done
```

Cut, paste and undo:

```python
from patternbook.command import AppContext, CutCommand, PasteCommand, run_command, undo_last

app = AppContext(editor="hello")
run_command(app, CutCommand())    # editor "", clipboard "hello"
run_command(app, PasteCommand())  # editor "hello"
undo_last(app)                    # editor ""
```

A rate-limiting proxy:

```python
from patternbook.proxy import NginxServer

nginx = NginxServer()
print(nginx.handle_request("/app/status", "GET"))  # (200, 'Ok')
print(nginx.handle_request("/app/status", "GET"))  # (200, 'Ok')
print(nginx.handle_request("/app/status", "GET"))  # (403, 'Not Allowed')
```

Running a pattern's demonstration from Python:

```python
from patternbook import facade, mediator

mediator.demo()
facade.demo()
```

## What it does not do

The package installs no command-line program; demonstrations are run by
calling each module's `demo()` function from Python. The command and state
examples have no interactive screen: their editor and player are plain Python
objects driven by method calls.