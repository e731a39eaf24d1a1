"""
Tests for the chooser integration
"""
import subprocess
import sys
from unittest.mock import patch

import pytest

from urlgrab.errors import MenuError
from urlgrab.menu import Menu, select_item
from urlgrab.models import Action
from .fixtures import create_mock_process, make_config


class TestMenuFromConfig:
    """Test Menu.from_config()"""

    def test_default_prompt(self):
        menu = Menu.from_config(make_config(prompt="URLs>"))
        assert menu.argv == ["dmenu", "-i", "-l", "10", "-p", "URLs>"]

    def test_extra_arguments_before_prompt(self):
        config = make_config(menu_extra_arguments=("-fn", "monospace"), prompt="CopyURL>")
        assert Menu.from_config(config).argv == [
            "dmenu", "-i", "-l", "10", "-fn", "monospace", "-p", "CopyURL>",
        ]

    def test_custom_prompt_flag(self):
        config = make_config(menu_command="fzf", menu_arguments=(), prompt_flag="--prompt", prompt="> ")
        assert Menu.from_config(config).argv == ["fzf", "--prompt", "> "]

    def test_empty_prompt_flag_skips_prompt(self):
        config = make_config(menu_arguments=(), prompt_flag="")
        assert Menu.from_config(config).argv == ["dmenu"]


class TestMenuShow:
    """Test Menu.show() against a mocked process"""

    @patch("urlgrab.menu.subprocess.Popen")
    def test_items_are_piped_newline_joined(self, mock_popen):
        """Test the items are written to the chooser's stdin"""
        mock_popen.return_value = create_mock_process("https://b.com\n")

        selected = Menu("dmenu", ["-i"]).show(["https://a.com", "https://b.com"])

        assert selected == "https://b.com"
        args, kwargs = mock_popen.call_args
        assert args[0] == ["dmenu", "-i"]
        assert kwargs["stdin"] == subprocess.PIPE
        assert kwargs["stdout"] == subprocess.PIPE
        mock_popen.return_value.communicate.assert_called_once_with("https://a.com\nhttps://b.com")

    @patch("urlgrab.menu.subprocess.Popen")
    def test_non_zero_exit_is_empty_selection(self, mock_popen):
        """Test a cancelled chooser yields an empty selection"""
        mock_popen.return_value = create_mock_process("", returncode=1)
        assert Menu("dmenu").show(["https://a.com"]) == ""

    @patch("urlgrab.menu.subprocess.Popen")
    def test_non_zero_exit_ignores_output(self, mock_popen):
        mock_popen.return_value = create_mock_process("https://a.com\n", returncode=2)
        assert Menu("dmenu").show(["https://a.com"]) == ""

    @patch("urlgrab.menu.subprocess.Popen")
    def test_output_newlines_are_trimmed(self, mock_popen):
        mock_popen.return_value = create_mock_process("\n[1] https://a.com\n\n")
        assert Menu("dmenu").show(["[1] https://a.com"]) == "[1] https://a.com"

    @patch("urlgrab.menu.subprocess.Popen")
    def test_start_failure_raises(self, mock_popen):
        """Test a missing chooser binary raises MenuError"""
        mock_popen.side_effect = FileNotFoundError("dmenu")
        with pytest.raises(MenuError, match="error starting menu"):
            Menu("dmenu").show(["https://a.com"])

    @patch("urlgrab.menu.subprocess.Popen")
    def test_read_failure_raises(self, mock_popen):
        proc = create_mock_process()
        proc.communicate.side_effect = OSError("broken pipe")
        mock_popen.return_value = proc
        with pytest.raises(MenuError, match="error reading menu output"):
            Menu("dmenu").show(["https://a.com"])
        proc.kill.assert_called_once()


class TestMenuShowProcess:
    """Test Menu.show() with a real child process"""

    def test_picks_first_line(self):
        menu = Menu(sys.executable, ["-c", "import sys; print(sys.stdin.readline().strip())"])
        assert menu.show(["https://a.com", "https://b.com"]) == "https://a.com"

    def test_cancelled_process(self):
        menu = Menu(sys.executable, ["-c", "import sys; sys.stdin.read(); sys.exit(1)"])
        assert menu.show(["https://a.com"]) == ""

    def test_missing_command(self, tmp_path):
        with pytest.raises(MenuError):
            Menu(str(tmp_path / "no-such-menu")).show(["https://a.com"])


class TestSelectItem:
    """Test select_item()"""

    @patch("urlgrab.menu.subprocess.Popen")
    def test_uses_config_argv(self, mock_popen):
        mock_popen.return_value = create_mock_process("https://a.com\n")
        config = make_config(action=Action.COPY, prompt="CopyURL>")

        assert select_item(["https://a.com"], config) == "https://a.com"
        assert mock_popen.call_args[0][0] == ["dmenu", "-i", "-l", "10", "-p", "CopyURL>"]

    @patch("urlgrab.menu.subprocess.Popen")
    def test_nothing_selected(self, mock_popen):
        mock_popen.return_value = create_mock_process("\n")
        assert select_item(["https://a.com"], make_config(action=Action.OPEN)) == ""
