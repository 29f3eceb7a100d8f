from metaboss.find import find_missing_editions


def test_gaps_are_reported():
    report = find_missing_editions([5, 1, 3])
    assert report.edition_numbers == (1, 3, 5)
    assert report.missing == (2, 4)


def test_no_editions():
    report = find_missing_editions([])
    assert report.edition_numbers == ()
    assert report.missing == ()


def test_contiguous_editions_have_no_gaps():
    report = find_missing_editions(range(10, 0, -1))
    assert report.missing == ()
    assert report.edition_numbers == tuple(range(1, 11))


def test_missing_and_present_partition_range():
    numbers = [2, 7, 11, 4]
    report = find_missing_editions(numbers)
    combined = set(report.missing) | set(report.edition_numbers)
    assert combined == set(range(1, 12))
    assert not set(report.missing) & set(report.edition_numbers)


def test_report_text():
    report = find_missing_editions([1, 3])
    assert str(report) == "Edition numbers: [1, 3]\nMissing numbers: [2]"