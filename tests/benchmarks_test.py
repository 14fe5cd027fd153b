import csv
import os
import sys

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from slist import benchmarks
from slist.datastructures import SinglyLinkedList


def test_operations_leave_expected_sizes():
    data = list(range(20))
    assert len(benchmarks.bench_push(data)) == 20
    assert benchmarks.bench_unshift(data).to_py() == data[::-1]
    assert len(benchmarks.bench_shift(data)) == 0
    assert len(benchmarks.bench_pop(data)) == 17
    assert len(benchmarks.bench_get_at(data)) == 20
    assert len(benchmarks.bench_find(data)) == 20
    assert benchmarks.bench_delete(data).to_py() == list(range(1, 20, 2))


def test_measure_true_space_grows_with_nodes():
    small = benchmarks.measure_true_space(SinglyLinkedList([1]))
    large = benchmarks.measure_true_space(SinglyLinkedList(range(100)))
    assert benchmarks.measure_true_space(SinglyLinkedList()) < small < large


def test_measure_operation_time_single_iteration_has_zero_stdev():
    avg_time, std_time, avg_space, std_space = benchmarks.measure_operation_time(
        benchmarks.bench_push, 10, iterations=1
    )
    assert avg_time >= 0
    assert std_time == 0.0
    assert avg_space > 0
    assert std_space == 0.0


def test_run_benchmarks_writes_csv(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    rows = benchmarks.run_benchmarks(str(out), base_input=4, steps=2, iterations=2)

    assert rows == 2 * len(benchmarks.OPERATIONS)
    with open(out, newline="") as f:
        table = list(csv.reader(f))
    assert table[0] == benchmarks.CSV_HEADER
    assert len(table) == rows + 1
    assert {r[1] for r in table[1:]} == set(benchmarks.OPERATIONS)
    assert {r[0] for r in table[1:]} == {"4", "8"}
    assert "Benchmark completed" in capsys.readouterr().out
