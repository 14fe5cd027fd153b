"""
Timing and memory benchmarks for SinglyLinkedList.

Each operation is run against randomly generated inputs whose size doubles
at every step. Average and standard deviation of wall time and estimated
memory footprint are written to a CSV file, one row per (size, operation).

Usage:
    python -m slist.cli bench --path linked_list_performance.csv
"""

import csv
import random
import statistics
import sys
import time

from .datastructures import SinglyLinkedList

# Defaults shared with the CLI
_DEFAULT_BASE_INPUT = 100
_DEFAULT_STEPS = 8
_DEFAULT_ITERATIONS = 5

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Std Dev Time (ms)",
    "Average Space (bytes)",
    "Std Dev Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_true_space(lst: SinglyLinkedList) -> int:
    """Estimate total memory of the list: the container, every node and every value."""
    total = sys.getsizeof(lst)
    node = lst.get_first()
    while node is not None:
        total += sys.getsizeof(node)
        total += sys.getsizeof(node.get())
        node = node.get_next()
    return total


def measure_operation_time(operation, input_size: int, iterations: int = _DEFAULT_ITERATIONS):
    """Run the operation multiple times and return avg/std of time (ms) and space (bytes)."""
    times = []
    space_used = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        lst = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds
        space_used.append(measure_true_space(lst))

    avg_time = statistics.mean(times)
    std_time = statistics.stdev(times) if len(times) > 1 else 0.0
    avg_space = statistics.mean(space_used)
    std_space = statistics.stdev(space_used) if len(space_used) > 1 else 0.0
    return avg_time, std_time, avg_space, std_space


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_push(data):
    return SinglyLinkedList(data)


def bench_unshift(data):
    lst = SinglyLinkedList()
    for item in data:
        lst.unshift(item)
    return lst


def bench_shift(data):
    lst = SinglyLinkedList(data)
    while len(lst) > 0:
        lst.shift()
    return lst


def bench_pop(data):
    # pop walks to the second-to-last node, so only a few are popped
    lst = SinglyLinkedList(data)
    for _ in range(3):
        lst.pop()
    return lst


def bench_get_at(data):
    lst = SinglyLinkedList(data)
    n = len(data)
    for idx in range(n - 1, n - 4, -1):
        lst.get_at(idx)
    return lst


def bench_find(data):
    lst = SinglyLinkedList(data)
    lst.find(lambda v: v < 0)  # never matches: full scan
    return lst


def bench_delete(data):
    lst = SinglyLinkedList(data)
    lst.delete(lambda v: v % 2 == 0)
    return lst


OPERATIONS = {
    "push": bench_push,
    "unshift": bench_unshift,
    "shift": bench_shift,
    "pop": bench_pop,
    "get_at": bench_get_at,
    "find": bench_find,
    "delete": bench_delete,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str,
    base_input: int = _DEFAULT_BASE_INPUT,
    steps: int = _DEFAULT_STEPS,
    iterations: int = _DEFAULT_ITERATIONS,
) -> int:
    """Run exponential performance tests and write them to *output_file*.

    Returns the number of data rows written.
    """
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time, avg_space, std_space = measure_operation_time(op_func, size, iterations)
                writer.writerow([
                    size,
                    op_name,
                    f"{avg_time:.3f}",
                    f"{std_time:.3f}",
                    f"{avg_space:.0f}",
                    f"{std_space:.0f}",
                ])
                rows += 1
                print(
                    f"{op_name:<8} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | Std Time: {std_time:.3f} ms "
                    f"| Avg Space: {avg_space:.0f} B | Std Space: {std_space:.0f} B"
                )

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows
