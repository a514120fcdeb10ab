import pytest

from turf.contact import Contact, say_hello


def test_from_info_matches_constructor():
    assert Contact.from_info("Ada Example", 2003) == Contact("Ada Example", 2003)


def test_get_info_format():
    contact = Contact.from_info("Ada Example", 2003)
    assert contact.get_info() == "Ada Example since : 2003"


def test_card_format():
    contact = Contact.from_info("Ada Example", 2003)
    assert contact.card() == "Ada Example - Member since: 2003"


def test_print_member_age(capsys):
    Contact.from_info("Ada Example", 2003).print_member_age()
    assert capsys.readouterr().out == "Ada Example, has been a memeber since 2003\n"


def test_since_out_of_range():
    with pytest.raises(ValueError):
        Contact("Ada Example", 70000)


def test_since_negative():
    with pytest.raises(ValueError):
        Contact("Ada Example", -1)


@pytest.mark.parametrize("coding, expected", [(True, "hello happy"), (False, "hello sad")])
def test_say_hello(capsys, coding, expected):
    assert say_hello(coding) == expected
    assert capsys.readouterr().out == expected + "\n"