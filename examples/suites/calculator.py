"""Example suite: run with ``python examples/suites/calculator.py``."""

from pathlib import Path

from pagetest import assert_equals, assert_true, load_config, run_to_page


class Calculator:
    def __init__(self):
        self.stack = []

    def push(self, value):
        self.stack.append(value)

    def add(self):
        self.stack.append(self.stack.pop() + self.stack.pop())
        return self.stack[-1]


fixture = {}


def _setup():
    fixture["calc"] = Calculator()


def _teardown():
    fixture.clear()


def _adds_two_numbers():
    calc = fixture["calc"]
    calc.push(2)
    calc.push(3)
    assert_equals(calc.add(), 5)


def _stack_keeps_result():
    calc = fixture["calc"]
    assert_equals(calc.stack, [5])


def _empty_add_raises():
    Calculator().add()


suite = {
    "Calculator": {
        "setup": _setup,
        "adds two numbers": _adds_two_numbers,
        "stack keeps the result": _stack_keeps_result,
        "adding an empty stack fails": _empty_add_raises,
        "teardown": _teardown,
    },
    "Loose equality": {
        "number equals numeric string": lambda: assert_equals(1, "1"),
        "zero equals false": lambda: assert_equals(0, False),
        "truth check is strict": lambda: assert_true(1),
    },
}


if __name__ == "__main__":
    config = load_config(Path(__file__).parent.parent / "page.yaml")
    summary, page = run_to_page(suite, config)
    print(f"{summary.passed} passed, {summary.failed} failed: {page}")
