"""Tests for the demo command line."""

import logging
import random
import sys

import pytest
from unittest.mock import MagicMock, Mock, patch
from blessed import Terminal
from screen_printer import XPrintingPosition, YPrintingPosition
from screen_printer.__main__ import configure_parser, random_frame, run


def create_mock_terminal(width=80, height=24):
    """Create a mock Terminal that supports the fullscreen contexts."""
    term = Mock(spec=Terminal)
    term.width = width
    term.height = height
    term.is_a_tty = True
    term.move_xy = Mock(return_value='')
    term.stream = Mock()
    term.fullscreen = MagicMock()
    term.hidden_cursor = MagicMock()
    return term


class TestParser:
    """Tests for option parsing."""

    def test_defaults(self):
        """Test default options."""
        options = configure_parser().parse_args([])

        assert options.width == 40
        assert options.height == 10
        assert options.x_position == XPrintingPosition.left()
        assert options.y_position == YPrintingPosition.bottom()

    def test_positions(self):
        """Test that positions accept names and numbers."""
        options = configure_parser().parse_args(['-x', 'middle', '-y', '3'])

        assert options.x_position == XPrintingPosition.middle()
        assert options.y_position == YPrintingPosition.custom(3)

    def test_bad_position(self):
        """Test that an unknown position is a usage error."""
        with pytest.raises(SystemExit):
            configure_parser().parse_args(['-x', 'sideways'])


class TestRun:
    """Tests for the demo loop."""

    def test_random_frame(self):
        """Test that frames are grids of digits."""
        grid = random_frame(5, 3, random.Random(7))

        assert grid.width == 5
        assert grid.height == 3
        assert all(row.isdigit() for row in grid)

    @patch('screen_printer.__main__.time.sleep')
    @patch('builtins.print')
    def test_run(self, mock_print, mock_sleep):
        """Test that every frame is printed inside the fullscreen context."""
        term = create_mock_terminal()

        status = run(['--frames', '3', '--width', '4', '--height', '2'], term=term)

        assert status == 0
        assert mock_sleep.call_count == 3
        term.fullscreen.assert_called_once()
        term.hidden_cursor.assert_called_once()

    @patch('screen_printer.__main__.time.sleep')
    @patch('builtins.print')
    def test_run_grid_too_large(self, mock_print, mock_sleep):
        """Test that a grid larger than the terminal exits with status 1."""
        term = create_mock_terminal(20, 5)

        status = run(['--frames', '1', '--width', '40'], term=term)

        assert status == 1
        mock_sleep.assert_not_called()

    @patch('screen_printer.__main__.time.sleep')
    @patch('builtins.print')
    def test_failure_reported_once(self, mock_print, mock_sleep, caplog):
        """Test that a failure prints one message and only logs at debug level."""
        term = create_mock_terminal(20, 5)

        with caplog.at_level(logging.DEBUG):
            status = run(['--frames', '1', '--width', '40'], term=term)

        assert status == 1
        stderr_calls = [
            call for call in mock_print.call_args_list
            if call.kwargs.get('file') is sys.stderr
        ]
        assert len(stderr_calls) == 1
        assert stderr_calls[0].args[0].startswith('Error: ')
        assert all(record.levelno == logging.DEBUG for record in caplog.records)
        assert any(record.name == 'screen_printer.cli' for record in caplog.records)
