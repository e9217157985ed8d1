from openpyxl import Workbook, load_workbook

from queensat.report import export_result, results_file_path, write_to_xlsx
from queensat.solver import solve_board


class TestWriteToXlsx:
    def test_creates_and_appends(self, tmp_path):
        output_path = str(tmp_path / "results")
        write_to_xlsx({"No": 1, "Problem": "4x4", "Result": "sat"}, output_path)
        path = write_to_xlsx({"No": 2, "Problem": "5x5", "Result": "sat"}, output_path)

        sheet = load_workbook(path)["Results"]
        rows = [row for row in sheet.iter_rows(values_only=True)]
        assert rows == [(1, "4x4", "sat"), (2, "5x5", "sat")]

    def test_replaces_broken_workbook(self, tmp_path):
        path = results_file_path(str(tmp_path))
        with open(path, "wb") as broken:
            broken.write(b"not a workbook")

        write_to_xlsx({"No": 7, "Problem": "6x6"}, str(tmp_path))

        sheet = load_workbook(path)["Results"]
        assert [row for row in sheet.iter_rows(values_only=True)] == [(7, "6x6")]

    def test_adds_missing_results_sheet(self, tmp_path):
        path = results_file_path(str(tmp_path))
        book = Workbook()
        book.active.title = "Other"
        book.save(path)

        write_to_xlsx({"No": 3, "Problem": "8x8"}, str(tmp_path))

        book = load_workbook(path)
        assert book.sheetnames == ["Other", "Results"]
        assert [row for row in book["Results"].iter_rows(values_only=True)] == [(3, "8x8")]


class TestExportResult:
    def test_record_columns(self, tmp_path):
        result = solve_board(3)
        path = export_result(result, str(tmp_path), "glucose3")

        row = next(load_workbook(path)["Results"].iter_rows(values_only=True))
        assert row[1:3] == ("3x3", "glucose3")
        assert row[4] == "unsat"
        assert row[5] == 9
        assert row[6] == 34
