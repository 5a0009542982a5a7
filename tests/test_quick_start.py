import pytest

from quick_start import main, parse_args


@pytest.mark.parametrize("modulus", ["0", "-2"])
def test_modulus_below_one_is_rejected(modulus, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--modulus", modulus])
    assert exc_info.value.code == 2
    assert "--modulus must be at least 1" in capsys.readouterr().err


def test_main_runs_with_default_modulus(capsys):
    main([])
    out = capsys.readouterr().out
    assert "[1:0, 2:1, 5:1, 8:0, 10:1, 11:2]" in out
    assert "Branch rooted at node 8" in out
