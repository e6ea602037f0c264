"""
End-to-end tests for hotel_analysis/cli.py.
"""

import pytest

from hotel_analysis.cli import main, EXIT_OK, EXIT_NO_DATA
from hotel_analysis.report import NO_DATA_MESSAGE


@pytest.mark.integration
class TestMain:
    """Run the CLI over files on disk."""

    def test_single_row_dataset(self, write_dataset, make_row, capsys):
        path = write_dataset([make_row(booking_id='B1', city='Paris', visitors='5',
                                       hotel='HotelX', price='100', discount='10%', margin='0.2')])

        exit_code = main([str(path)])
        out = capsys.readouterr().out

        assert exit_code == EXIT_OK
        assert "Country with highest number of bookings: France with 1 bookings." in out
        assert "Hotel: HotelX (Paris, France)" in out
        assert "Avg discount: 10.00%" in out

    def test_header_only_reports_no_data(self, write_dataset, capsys):
        path = write_dataset([])

        exit_code = main([str(path)])
        out = capsys.readouterr().out

        assert exit_code == EXIT_NO_DATA
        assert NO_DATA_MESSAGE in out
        assert "Most economical" not in out

    def test_missing_file_is_soft_failure(self, tmp_path, capsys):
        exit_code = main([str(tmp_path / 'missing.csv')])
        captured = capsys.readouterr()

        assert exit_code == EXIT_NO_DATA
        assert NO_DATA_MESSAGE in captured.out
        assert "Traceback" not in captured.out

    def test_all_rows_invalid(self, write_dataset, make_row, capsys):
        path = write_dataset([make_row(price='n/a'), make_row(n_columns=5)])

        assert main([str(path)]) == EXIT_NO_DATA

    def test_delimiter_option(self, write_dataset, make_row, capsys):
        path = write_dataset([make_row(delimiter=';'), make_row(delimiter=';', hotel='Other')])

        assert main([str(path), '--delimiter', ';']) == EXIT_OK
        assert "Most profitable hotel:" in capsys.readouterr().out

    def test_low_min_columns_drops_short_rows(self, write_dataset, make_row, capsys):
        """--min-columns below the layout never lets a short row crash the run."""
        path = write_dataset([make_row(n_columns=12), make_row(hotel='Full')])

        exit_code = main([str(path), '--min-columns', '5'])
        out = capsys.readouterr().out

        assert exit_code == EXIT_OK
        assert "with 1 bookings." in out
        assert "Hotel: Full (Paris, France)" in out

    def test_non_finite_rows_are_dropped(self, write_dataset, make_row, capsys):
        path = write_dataset([
            make_row(hotel='A', price='nan'),
            make_row(hotel='B', price='100'),
            make_row(hotel='C', price='200'),
        ])

        assert main([str(path)]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Hotel: B (Paris, France)" in out
        assert "nan" not in out

    def test_verbose_flag(self, write_dataset, make_row, capsys):
        path = write_dataset([make_row(), make_row(price='bad')])
        assert main([str(path), '--verbose']) == EXIT_OK
