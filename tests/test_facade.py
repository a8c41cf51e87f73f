import smtplib
from unittest.mock import patch

import pytest

from l2utils.facade import MailFacade, Message, SMTPConfig, run_facade


def _mail(**overrides):
    values = dict(
        sender="sender@example.com",
        recipient="recipient@example.com",
        subject="Subject",
        body="Body",
        key="placeholder",
    )
    values.update(overrides)
    return MailFacade(**values)


def test_default_address_uses_gmail_submission_port():
    assert SMTPConfig().address() == "smtp.gmail.com:587"


def test_custom_address_joins_host_and_port():
    config = SMTPConfig(host="mail.example.com", port="2525")
    assert config.address() == "mail.example.com" + ":" + "2525"


def test_message_content_is_subject_newline_body():
    subject, body = "Тема", "Письмо"
    assert Message(subject, body).content() == (subject + "\n" + body).encode("utf-8")


@patch("l2utils.facade.smtplib.SMTP")
def test_send_logs_in_and_delivers(mock_smtp):
    smtp = mock_smtp.return_value.__enter__.return_value
    smtp.has_extn.return_value = True
    mail = _mail()
    result = mail.send()
    assert result is None
    mock_smtp.assert_called_once_with("smtp.gmail.com", 587)
    smtp.starttls.assert_called_once_with()
    smtp.login.assert_called_once_with("sender@example.com", "placeholder")
    smtp.sendmail.assert_called_once_with(
        "sender@example.com", ["recipient@example.com"], b"Subject\nBody"
    )


@patch("l2utils.facade.smtplib.SMTP")
def test_send_skips_starttls_when_unsupported(mock_smtp):
    smtp = mock_smtp.return_value.__enter__.return_value
    smtp.has_extn.return_value = False
    result = _mail(config=SMTPConfig(host="localhost", port="25")).send()
    assert result is None
    mock_smtp.assert_called_once_with("localhost", 25)
    assert smtp.starttls.call_count == 0
    assert smtp.sendmail.call_count == 1


@patch("l2utils.facade.smtplib.SMTP")
def test_send_raises_on_failed_login(mock_smtp):
    smtp = mock_smtp.return_value.__enter__.return_value
    smtp.login.side_effect = smtplib.SMTPAuthenticationError(535, b"rejected")
    with pytest.raises(smtplib.SMTPAuthenticationError):
        _mail().send()
    assert smtp.sendmail.call_count == 0


@patch("l2utils.facade.smtplib.SMTP")
def test_run_facade_reports_failure(mock_smtp, capsys):
    mock_smtp.side_effect = ConnectionRefusedError()
    run_facade()
    assert capsys.readouterr().out == "Произошла ошибка при отправке сообщения\n"


@patch("l2utils.facade.smtplib.SMTP")
def test_run_facade_is_silent_on_success(mock_smtp, capsys):
    run_facade()
    assert capsys.readouterr().out == ""
    smtp = mock_smtp.return_value.__enter__.return_value
    assert smtp.sendmail.call_count == 1