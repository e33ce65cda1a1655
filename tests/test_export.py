"""
test_export.py — Tests for text and CSV exports
"""

import numpy as np
import pandas as pd

from dpalign.aligners import needleman_wunsch, smith_waterman
from dpalign.export import (
    alignment_table,
    format_report,
    match_line,
    matrix_table,
    summary_table,
    write_csv,
    write_matrix_csv,
    write_report,
)


def test_match_line():
    assert match_line("ACGT", "AC--") == "||  "
    assert match_line("A-C", "A-G") == "|  "
    assert match_line("", "") == ""


class TestReport:

    def test_global_report(self, unit_scoring):
        result = needleman_wunsch("ACGT", "AC", unit_scoring)
        lines = format_report(result).splitlines()
        assert lines == [
            "Alignment Result",
            "================",
            "Algorithm: Needleman-Wunsch (Global)",
            "Score: 0",
            "Identity: 50.00%",
            "Length: 4",
            "",
            "Seq1: ACGT",
            "      ||  ",
            "Seq2: AC--",
        ]

    def test_local_report(self, unit_scoring):
        result = smith_waterman("TTACGTT", "GGACGAA", unit_scoring)
        text = format_report(result)
        assert "Algorithm: Smith-Waterman (Local)" in text
        assert "Score: 3" in text
        assert "Identity: 100.00%" in text

    def test_write_report(self, tmp_path, unit_scoring):
        result = needleman_wunsch("ACGT", "AC", unit_scoring)
        path = write_report(result, tmp_path / "report.txt")
        assert path.read_text(encoding="utf-8") == format_report(result)


class TestTables:

    def test_summary_table(self, unit_scoring):
        result = needleman_wunsch("ACGT", "AC", unit_scoring)
        table = summary_table(result)
        assert list(table.columns) == ["Parameter", "Value"]
        assert dict(zip(table["Parameter"], table["Value"])) == {
            "Algorithm": "Needleman-Wunsch (Global)",
            "Score": "0",
            "Identity (%)": "50.00",
            "Length": "4",
        }

    def test_alignment_table(self, unit_scoring):
        result = needleman_wunsch("ACGT", "AC", unit_scoring)
        table = alignment_table(result)
        assert list(table.columns) == ["Index", "Sequence 1", "Match", "Sequence 2"]
        assert list(table["Index"]) == [1, 2, 3, 4]
        assert "".join(table["Sequence 1"]) == "ACGT"
        assert "".join(table["Sequence 2"]) == "AC--"
        assert "".join(table["Match"]) == "||  "

    def test_matrix_table(self, unit_scoring):
        result = needleman_wunsch("ACGT", "AC", unit_scoring)
        table = matrix_table(result)
        assert list(table.index) == ["-", "A", "C", "G", "T"]
        assert list(table.columns) == ["-", "A", "C"]
        np.testing.assert_array_equal(table.to_numpy(), result.matrix)


class TestCsvFiles:

    def test_write_csv_layout(self, tmp_path, unit_scoring):
        result = needleman_wunsch("ACGT", "AC", unit_scoring)
        path = write_csv(result, tmp_path / "alignment.csv")
        rows = path.read_bytes().decode("utf-8").split("\r\n")
        assert rows[:6] == [
            '"Parameter","Value"',
            '"Algorithm","Needleman-Wunsch (Global)"',
            '"Score","0"',
            '"Identity (%)","50.00"',
            '"Length","4"',
            "",
        ]
        assert rows[6] == '"Index","Sequence 1","Match","Sequence 2"'
        assert rows[7] == '"1","A","|","A"'
        assert rows[10] == '"4","T"," ","-"'
        assert rows[11:] == [""]

    def test_write_csv_empty_local(self, tmp_path, unit_scoring):
        result = smith_waterman("AC", "GT", unit_scoring)
        path = write_csv(result, tmp_path / "empty.csv")
        rows = path.read_bytes().decode("utf-8").split("\r\n")
        assert '"Length","0"' in rows
        assert rows[-2] == '"Index","Sequence 1","Match","Sequence 2"'

    def test_write_matrix_csv(self, tmp_path, default_scoring):
        result = needleman_wunsch("GATTACA", "GCATGCA", default_scoring)
        path = write_matrix_csv(result, tmp_path / "matrix.csv")
        back = pd.read_csv(path, index_col=0)
        assert back.shape == result.matrix.shape
        np.testing.assert_array_equal(back.to_numpy(), result.matrix)
