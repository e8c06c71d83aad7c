import json

from pricing_tracker.detection import runner
from pricing_tracker.excel import OpenPyXLFileHandler


def _save(path, sheets_data):
    path.write_bytes(OpenPyXLFileHandler.from_sheets_data(sheets_data).to_bytes())
    return path


def test_runner_prints_summary(tmp_path, capsys, sales_headers):
    book = _save(tmp_path / "26FA SALES.xlsx", {"Sheet1": ([[1, 2, "REI", "KA", "2026-01-01"]], sales_headers)})

    code = runner.main([str(book)])

    out = capsys.readouterr().out
    assert code == 0
    assert "26FA SALES.xlsx: sales (high), season 26FA, 1 rows, sheet 'Sheet1'" in out


def test_runner_json_output(tmp_path, capsys, line_list_headers):
    book = _save(tmp_path / "linelist.xlsx", {"Line List": ([["1001", "Jacket", 199, 99, "Jackets", "Mens"]], line_list_headers)})

    code = runner.main([str(book), "--json"])

    results = json.loads(capsys.readouterr().out)
    assert code == 0
    assert results[0]["detectedType"] == "lineList"
    assert results[0]["detectedSeason"] is None


def test_runner_reports_failures(tmp_path, capsys, sales_headers):
    good = _save(tmp_path / "good.xlsx", {"Sheet1": ([[1, 2, "REI", "KA", "x"]], sales_headers)})
    bad = tmp_path / "bad.xlsx"
    bad.write_bytes(b"nope")

    code = runner.main([str(bad), str(good)])

    captured = capsys.readouterr()
    assert code == 1
    assert "bad.xlsx: ERROR" in captured.err
    assert "good.xlsx: sales" in captured.out
