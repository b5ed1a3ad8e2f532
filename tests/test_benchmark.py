import io

import pytest

from powhash.benchmark import (
    BenchmarkResult,
    benchmark_algorithm,
    format_header,
    format_row,
    main,
    run_benchmark,
)
from powhash.proofofwork import HashAlgorithm


def test_format_header_columns():
    lines = format_header(3).splitlines()
    assert len(lines) == 3
    assert lines[0] == lines[2]
    assert len({len(line) for line in lines}) == 1
    titles = [cell.strip() for cell in lines[1].split("|")]
    assert titles == ["Algorithm", "Sec 1", "Sec 2", "Sec 3", "Average", "Min", "Max"]


def test_format_row_values_and_width():
    result = BenchmarkResult(HashAlgorithm.NT, (1, 2, 3))
    row = format_row(result)
    cells = [cell.strip() for cell in row.split("|")]
    assert cells == ["NT Hash", "1", "2", "3", "2", "1", "3"]
    assert len(row) == len(format_header(3).splitlines()[1])


def test_result_statistics():
    result = BenchmarkResult(HashAlgorithm.MD5, (4, 9, 5))
    assert result.label == "MD5"
    assert result.total == 18
    assert result.average == 6
    assert result.minimum == 4
    assert result.maximum == 9


def test_benchmark_algorithm_counts():
    result = benchmark_algorithm(HashAlgorithm.MD5, threads=2, duration=1)
    assert result.algorithm is HashAlgorithm.MD5
    assert len(result.per_second) == 1
    assert result.total > 0


def test_benchmark_rejects_bad_arguments():
    with pytest.raises(ValueError):
        benchmark_algorithm(HashAlgorithm.MD5, threads=0, duration=1)
    with pytest.raises(ValueError):
        benchmark_algorithm(HashAlgorithm.MD5, threads=1, duration=0)


def test_run_benchmark_writes_table():
    stream = io.StringIO()
    results = run_benchmark([HashAlgorithm.MD4], threads=1, duration=1, stream=stream)
    text = stream.getvalue()
    assert len(results) == 1
    assert format_row(results[0]) in text
    assert "Hash Algorithm Benchmark - 1 threads, 1 seconds per algorithm" in text
    assert 'Test data: "Hello World"' in text
    assert text.rstrip().endswith("Benchmark complete! (All values are hashes per second)")


def test_main_runs(capsys):
    code = main(["--algorithm", "MD5", "--threads", "1", "--duration", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("Starting hash algorithm benchmark...")
    assert "\nMD5 " in out


def test_main_rejects_unknown_algorithm(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--algorithm", "bogus"])
    assert excinfo.value.code == 2