import selftest


def test_selftest_reports_ok():
    out = selftest.run()
    assert out["svg"] == "ok"
    assert out["png"] in ("ok", "skipped")
