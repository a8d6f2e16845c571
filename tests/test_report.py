from hg4dslicer.report import ValidationReport


def test_new_report_is_valid_and_empty():
    report = ValidationReport()
    assert report.valid is True
    assert report.errors == []
    assert report.warnings == []
    assert report.info == []


def test_add_error_invalidates():
    report = ValidationReport()
    report.add_error("pressure too high")
    assert report.valid is False
    assert report.errors == ["pressure too high"]


def test_add_warning_keeps_valid():
    report = ValidationReport()
    report.add_warning("slow valves")
    assert report.valid is True
    assert report.warnings == ["slow valves"]
    assert report.errors == []


def test_add_info_keeps_valid():
    report = ValidationReport()
    report.add_info("checked 10 commands")
    assert report.valid is True
    assert report.info == ["checked 10 commands"]


def test_messages_keep_order():
    report = ValidationReport()
    for msg in ["a", "b", "c"]:
        report.add_warning(msg)
    assert report.warnings == ["a", "b", "c"]


def test_warning_after_error_stays_invalid():
    report = ValidationReport()
    report.add_error("bad")
    report.add_warning("meh")
    report.add_info("note")
    assert report.valid is False
    assert len(report.errors) == 1


def test_reports_do_not_share_lists():
    first = ValidationReport()
    second = ValidationReport()
    first.add_error("x")
    assert second.errors == []
    assert second.valid is True