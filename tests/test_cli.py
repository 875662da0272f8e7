"""Tests for the command line interface."""

import io

import pytest

from linewrap.cli import main


class TestCli:
    """Tests for linewrap.cli.main."""

    def test_demo(self, capsys):
        """--demo wraps the sample sentence at 13 characters."""
        assert main(['--demo']) == 0
        out = capsys.readouterr().out
        assert out == 'This long\nline is\nreally not\nthat long,\nbut it is not\nshort\neither.\n'

    def test_text_argument(self, capsys):
        """Positional text is wrapped to --max-length."""
        main(['one two three', '--max-length', '7'])
        assert capsys.readouterr().out == 'one two\nthree\n'

    def test_file(self, tmp_path, capsys):
        """--file input keeps CR characters for normalization."""
        path = tmp_path / 'input.txt'
        path.write_bytes(b'first line\r\nsecond line here')

        main(['--file', str(path), '-w', '8'])
        assert capsys.readouterr().out == 'first\nline\nsecond\nline\nhere\n'

    def test_stdin(self, monkeypatch, capsys):
        """Text is read from stdin when no argument is given."""
        monkeypatch.setattr('sys.stdin', io.StringIO('a b'))
        main([])
        assert capsys.readouterr().out == 'a b'

    def test_disabled_wrapping(self, capsys):
        """A zero length passes the text through unchanged."""
        main(['a rather long piece of text  ', '-w', '0'])
        assert capsys.readouterr().out == 'a rather long piece of text  '

    def test_text_and_file_conflict(self, tmp_path):
        """TEXT and --file cannot be combined."""
        path = tmp_path / 'input.txt'
        path.write_text('x')
        with pytest.raises(SystemExit) as exc_info:
            main(['text', '--file', str(path)])
        assert exc_info.value.code == 2

    def test_missing_file(self, tmp_path):
        """An unreadable file is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--file', str(tmp_path / 'missing.txt')])
        assert exc_info.value.code == 2

    def test_invalid_length(self):
        """A non-integer length is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(['text', '-w', 'wide'])
        assert exc_info.value.code == 2
