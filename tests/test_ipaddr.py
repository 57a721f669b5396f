import pytest

from algonotes.ipaddr import is_valid_segment, restore_ip_addresses


def test_standard_case():
    assert restore_ip_addresses("25525511135") == ["255.255.11.135", "255.255.111.35"]


def test_all_zeros():
    assert restore_ip_addresses("0000") == ["0.0.0.0"]


def test_too_long_gives_nothing():
    assert restore_ip_addresses("1111111111111") == []


def test_too_short_gives_nothing():
    assert restore_ip_addresses("111") == []


@pytest.mark.parametrize("digits", ["25525511135", "101023", "0000", "1111", "255255255255"])
def test_results_spell_the_input(digits):
    results = restore_ip_addresses(digits)
    assert results
    for address in results:
        parts = address.split(".")
        assert len(parts) == 4
        assert "".join(parts) == digits
        assert all(is_valid_segment(part) for part in parts)


def test_results_are_unique():
    results = restore_ip_addresses("101023")
    assert len(results) == len(set(results))


def test_leading_zero_rejected():
    assert is_valid_segment("01") is False
    assert is_valid_segment("0") is True


def test_upper_bound():
    assert is_valid_segment("255") is True
    assert is_valid_segment("256") is False


def test_non_numeric_segment_raises():
    with pytest.raises(ValueError):
        is_valid_segment("a1")