# tests/test_cli.py

from ethcal import cli


def test_month(capsys):
    assert cli.main(["month", "2016", "13", "--lang", "english"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Pagume 2016"
    assert "09-10" in out
    assert "09-11" not in out

def test_month_with_holidays(capsys):
    assert cli.main(["month", "2016", "1", "--lang", "english", "--week-start", "0"]) == 0
    out = capsys.readouterr().out
    assert "Meskel" in out
    assert "Enkutatash" in out

def test_day(capsys):
    assert cli.main(["day", "2016-08-27"]) == 0
    out = capsys.readouterr().out
    assert "2024-05-05" in out
    assert "Fasika" in out

def test_day_from_gregorian(capsys):
    assert cli.main(["day", "2023-09-14", "--gregorian"]) == 0
    assert "no events" in capsys.readouterr().out

def test_holidays_by_tag(capsys):
    assert cli.main(["holidays", "2016", "--tag", "muslim"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [l.split("  ")[2] for l in lines] == ["Mawlid", "Eid al-Fitr", "Eid al-Adha"]

def test_format(capsys):
    assert cli.main(["format", "time-only", "--lang", "english", "--at", "2024-05-05T08:30"]) == 0
    assert capsys.readouterr().out.strip() == "02:30 Morning"

def test_feasts(capsys):
    assert cli.main(["feasts", "--from-year", "2016", "--to-year", "2016"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[2].split()[:7] == ["2016", "06-18", "07-02", "07-29", "08-20", "08-25", "08-27"]
