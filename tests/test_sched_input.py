import pytest

from dsakit.sched_input import (
    AlgorithmSpec,
    Process,
    Workload,
    parse_algorithms,
    parse_process,
    parse_workload,
)


def test_parse_algorithms_with_and_without_quantum():
    assert parse_algorithms("1,2-4,8-1") == [
        AlgorithmSpec("1", -1),
        AlgorithmSpec("2", 4),
        AlgorithmSpec("8", 1),
    ]


def test_parse_algorithms_single():
    assert parse_algorithms("5") == [AlgorithmSpec("5")]


def test_parse_algorithms_default_quantum_is_minus_one():
    assert AlgorithmSpec("3").quantum == -1


def test_parse_algorithms_empty_piece_raises():
    with pytest.raises(ValueError):
        parse_algorithms("")


def test_parse_algorithms_bad_quantum_raises():
    with pytest.raises(ValueError):
        parse_algorithms("2-x")


def test_parse_process():
    assert parse_process("A,0,3") == Process("A", 0, 3)


def test_parse_process_missing_field_raises():
    with pytest.raises(ValueError):
        parse_process("A,0")


def test_parse_process_non_numeric_raises():
    with pytest.raises(ValueError):
        parse_process("A,x,3")


def test_parse_workload_full():
    text = "trace 1,2-4 20 3\nA,0,3\nB,2,6\nC,4,4\n"
    workload = parse_workload(text)
    assert workload == Workload(
        operation="trace",
        algorithms=(AlgorithmSpec("1"), AlgorithmSpec("2", 4)),
        last_instant=20,
        processes=(Process("A", 0, 3), Process("B", 2, 6), Process("C", 4, 4)),
    )


def test_parse_workload_too_few_processes_raises():
    with pytest.raises(ValueError):
        parse_workload("stats 1 20 3 A,0,3 B,2,6")


def test_parse_workload_missing_header_raises():
    with pytest.raises(ValueError):
        parse_workload("stats 1 20")


def test_parse_workload_non_integer_header_raises():
    with pytest.raises(ValueError):
        parse_workload("stats 1 twenty 1 A,0,3")