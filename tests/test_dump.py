import logging

import argx

from argx import args, const, dump, vt100


def test_render():
    res = args.parse(["a", "-k", "v", "-k", "w", "-e", "--f"])
    assert dump.render(res) == "\n".join(
        [
            "Arguments: 1",
            "   [0] : a",
            "Options: 2",
            "   k : 2",
            "      v",
            "      w",
            "   e : 0",
            "Flags: 1",
            "   f",
        ]
    )


def test_render_empty():
    assert dump.render(args.ParseResult()) == "Arguments: 0\nOptions: 0\nFlags: 0"


def test_render_color():
    out = dump.render(args.parse(["--f"]), color=True)
    assert f"{vt100.BOLD}{vt100.WHITE}Flags{vt100.RESET}: 1" in out
    assert f"{vt100.GREEN}f{vt100.RESET}" in out


# --- Main ------------------------------------------------------------------- #


def test_main(capsys, monkeypatch):
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    assert argx.main(["in.txt", "-o", "out.txt", "--force"]) == 0
    out = capsys.readouterr().out
    assert "Arguments: 1\n   [0] : in.txt\n" in out
    assert "   o : 1\n      out.txt\n" in out
    assert "Flags: 1\n   force\n" in out


def test_main_extra_args(capsys, monkeypatch):
    monkeypatch.setenv(const.EXTRA_ARGS_ENV, "first -k v")
    assert argx.main(["last"]) == 0
    out = capsys.readouterr().out
    assert "   [0] : first\n   [1] : last\n" in out
    assert "   k : 1\n      v\n" in out


def test_main_version(capsys, monkeypatch):
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    assert argx.main(["--version"]) == 0
    assert capsys.readouterr().out == f"argx v{const.VERSION_STR}\n"


def test_main_error(capsys, monkeypatch):
    def fail(result):
        raise args.KeyNotFound("Option not found: k")

    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    monkeypatch.setattr(dump, "dump", fail)
    assert argx.main([]) == 1
    assert "Option not found: k" in capsys.readouterr().err


def test_main_verbose_logs_classification(capsys, caplog, monkeypatch):
    def setup(result):
        caplog.set_level(logging.DEBUG, logger="argx")

    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    monkeypatch.setattr(argx.logger, "setup", setup)
    assert argx.main(["a", "-k", "v", "--verbose"]) == 0
    assert "Argument 'a'" in caplog.text
    assert "Value 'v' for option 'k'" in caplog.text
    assert "Flag 'verbose'" in caplog.text
    assert "Flags: 1\n   verbose\n" in capsys.readouterr().out
