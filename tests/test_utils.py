import io

from fractview.utils import UsageError, lowercase_ascii, show_help


def test_lowercase_ascii_letters():
    assert lowercase_ascii("MANDELBROT") == "mandelbrot"
    assert lowercase_ascii("JuLiA") == "julia"


def test_lowercase_leaves_non_ascii_untouched():
    assert lowercase_ascii("ÀB1_") == "Àb1_"


def test_lowercase_is_idempotent():
    text = "Burning Ship 42"
    once = lowercase_ascii(text)
    assert lowercase_ascii(once) == once
    assert len(once) == len(text)


def test_show_help_writes_tutorial():
    buf = io.StringIO()
    show_help(buf)
    text = buf.getvalue()
    assert "TUTORIAL" in text
    assert "Press L to lock Julia's fractal" in text
    assert text.startswith("\n") and text.endswith("\n")


def test_show_help_defaults_to_stdout(capsys):
    show_help()
    assert "KEYBOARD" in capsys.readouterr().out


def test_usage_error_carries_message():
    err = UsageError("bad argument")
    assert str(err) == "bad argument"
    assert issubclass(UsageError, Exception)