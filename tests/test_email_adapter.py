import pytest

from bento_mailer.providers.email_adapter import Address, EmailMessage


def test_coerce_bare_string():
    assert Address.coerce('a@example.com') == Address(email='a@example.com')


def test_coerce_pair():
    address = Address.coerce(('Alice', 'a@example.com'))
    assert address.name == 'Alice'
    assert address.extract_address() == 'a@example.com'


def test_coerce_rejects_other_shapes():
    with pytest.raises(TypeError):
        Address.coerce(42)


def test_single_recipient_is_wrapped_in_a_list():
    message = EmailMessage(from_email='s@example.com', to='r@example.com', cc=None)
    assert message.to == ['r@example.com']
    assert message.cc == []
    assert message.bcc == []
    assert message.attachments == []
    assert message.provider_options == {}


def test_recipient_lists_are_copied():
    recipients = [('R', 'r@example.com')]
    message = EmailMessage(from_email='s@example.com', to=recipients)
    recipients.append('other@example.com')
    assert message.to == [('R', 'r@example.com')]


def test_single_pair_recipient_is_one_address():
    message = EmailMessage(from_email=('App', 'app@example.com'), to=('User', 'user@example.com'))
    assert message.to == [('User', 'user@example.com')]


def test_pair_cc_and_bcc_are_one_address_each():
    message = EmailMessage(
        from_email='s@example.com',
        cc=('Copy', 'cc@example.com'),
        bcc=('Blind', 'bcc@example.com')
    )
    assert message.cc == [('Copy', 'cc@example.com')]
    assert message.bcc == [('Blind', 'bcc@example.com')]


def test_recipient_list_of_two_strings_stays_two_recipients():
    message = EmailMessage(from_email='s@example.com', to=['a@example.com', 'b@example.com'])
    assert message.to == ['a@example.com', 'b@example.com']


def test_coerce_rejects_two_element_list():
    with pytest.raises(TypeError):
        Address.coerce(['a@example.com', 'b@example.com'])
