import responses
from responses import matchers

from eonetmap.api import BASE_URL
from eonetmap.cli import main

PAYLOAD = {
    "events": [
        {
            "id": "e1",
            "title": "Fire",
            "geometry": [{"date": "d", "type": "Point", "coordinates": [10.5, 20.25]}],
        },
        {"id": "e2", "title": "Hidden"},
    ]
}


def test_main_prints_recent_events(capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{BASE_URL}/events",
            json=PAYLOAD,
            match=[matchers.query_param_matcher({"days": "3"})],
        )
        code = main(["--days", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.splitlines() == ["Fire\t20.25\t10.5"]


def test_main_defaults_to_seven_days(capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{BASE_URL}/events",
            json={"events": []},
            match=[matchers.query_param_matcher({"days": "7"})],
        )
        code = main([])
    assert code == 0
    assert capsys.readouterr().out == ""


def test_main_reports_failure(capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE_URL}/events", status=503)
        code = main(["--days", "2"])
    captured = capsys.readouterr()
    assert code == 1
    assert "invalid JSON file format" in captured.err
    assert captured.out == ""