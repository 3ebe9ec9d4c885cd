from oui2manuf.address import is_locally_administered, normalize_mac


def test_normalize_mac():
    assert normalize_mac("aa-bb-cc-11-22-33") == "AA:BB:CC:11:22:33"
    assert normalize_mac(" AA:BB:CC:11:22:33 ") == "AA:BB:CC:11:22:33"


def test_is_locally_administered():
    assert is_locally_administered("02:00:00:00:00:01")
    assert is_locally_administered("da-a1-19-00-00-01")
    assert not is_locally_administered("00:00:00:AA:BB:CC")
    assert not is_locally_administered("invalid-mac")
