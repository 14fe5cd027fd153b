"""
Linked List Command-Line Interface (CLI)

Exposes the SinglyLinkedList container and its benchmark harness via
subcommands:
- run: build a list and apply a sequence of operations, echoing each step
- bench: time every operation over growing inputs and write a CSV report

Usage examples:
    python -m slist.cli run push:4 delete-at:1 pop --items 1 2 3
    python -m slist.cli run unshift:a insert-at:1:b --separator " -> "
    python -m slist.cli bench --path linked_list_performance.csv --steps 6

Operations go before --items, since --items consumes every value after it.
"""

import argparse
import sys

from .benchmarks import _DEFAULT_BASE_INPUT, _DEFAULT_ITERATIONS, _DEFAULT_STEPS, run_benchmarks
from .datastructures import SinglyLinkedList
from .datastructures.singly_linked_list import DEFAULT_SEPARATOR

# Operation name -> number of ":"-separated arguments it takes
OP_ARITY = {
    "push": 1,
    "unshift": 1,
    "shift": 0,
    "pop": 0,
    "insert-at": 2,
    "delete-at": 1,
    "delete": 1,
    "find": 1,
    "get-at": 1,
    "clear": 0,
}

# Operations whose first argument is an index
_INDEXED_OPS = {"insert-at", "delete-at", "get-at"}

OUT_OF_RANGE = "index out of range"
EMPTY = "list is empty"
NOT_FOUND = "not found"


# -------------------------------------------------------------------
# Utility: operation token parsing
# -------------------------------------------------------------------
def parse_op(token):
    """Parse ``name[:arg[:arg]]`` into ``(name, args)``.

    Used as an argparse ``type`` so malformed tokens become usage errors.
    """
    name, *args = token.split(":", OP_ARITY.get(token.split(":", 1)[0], 0))
    if name not in OP_ARITY:
        raise argparse.ArgumentTypeError(f"unknown operation {name!r}")
    if len(args) != OP_ARITY[name]:
        raise argparse.ArgumentTypeError(f"{name} expects {OP_ARITY[name]} argument(s), got {token!r}")
    if name in _INDEXED_OPS:
        try:
            args[0] = int(args[0])
        except ValueError:
            raise argparse.ArgumentTypeError(f"{name} index must be an integer, got {args[0]!r}")
    return name, args


def apply_op(lst, name, args):
    """Apply one parsed operation to *lst* and return a short outcome string."""
    if name == "push":
        return f"size {lst.push(args[0])}"
    if name == "unshift":
        return f"size {lst.unshift(args[0])}"
    if name == "shift":
        node = lst.shift()
        return EMPTY if node is None else f"removed {node.get()}"
    if name == "pop":
        node = lst.pop()
        return EMPTY if node is None else f"removed {node.get()}"
    if name == "insert-at":
        node = lst.insert_at(args[0], args[1])
        return OUT_OF_RANGE if node is None else f"size {len(lst)}"
    if name == "delete-at":
        size = lst.delete_at(args[0])
        return OUT_OF_RANGE if size is None else f"size {size}"
    if name == "delete":
        return f"size {lst.delete(lambda v: v == args[0])}"
    if name == "find":
        node = lst.find(lambda v: v == args[0])
        return NOT_FOUND if node is None else f"found {node.get()}"
    if name == "get-at":
        node = lst.get_at(args[0])
        return OUT_OF_RANGE if node is None else f"value {node.get()}"
    # clear
    lst.clear()
    return "size 0"


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_run(args):
    """Build a list from --items and apply each operation in order."""
    lst = SinglyLinkedList(args.items)
    print(f"start -> size {len(lst)} | {lst.to_string(args.separator)}")
    for name, op_args in args.ops:
        label = " ".join([name] + [str(a) for a in op_args])
        outcome = apply_op(lst, name, op_args)
        print(f"{label} -> {outcome} | {lst.to_string(args.separator)}")


def cmd_bench(args):
    """Run the benchmark harness and write a CSV report."""
    rows = run_benchmarks(
        args.path,
        base_input=args.base_input,
        steps=args.steps,
        iterations=args.iterations,
    )
    print(f"Wrote {rows} rows to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text!r}")
    return value


def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m slist.cli", description="Singly linked list CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- list operations ---
    s = sub.add_parser("run", help="Apply operations to a list and print each step")
    s.add_argument("ops", nargs="*", type=parse_op, metavar="OP",
                   help="push:V unshift:V shift pop insert-at:I:V delete-at:I delete:V find:V get-at:I clear")
    s.add_argument("--items", nargs="+", default=[], help="Initial values")
    s.add_argument("--separator", default=DEFAULT_SEPARATOR)
    s.set_defaults(func=cmd_run)

    # --- benchmarks ---
    s = sub.add_parser("bench", help="Benchmark list operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=_positive_int, default=_DEFAULT_BASE_INPUT)
    s.add_argument("--steps", type=_positive_int, default=_DEFAULT_STEPS)
    s.add_argument("--iterations", type=_positive_int, default=_DEFAULT_ITERATIONS)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m slist.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
